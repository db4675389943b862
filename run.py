# run.py

import uvicorn
from client_parser.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "client_parser.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )
