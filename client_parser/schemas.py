# client_parser/schemas.py

from pydantic import BaseModel, Field
from typing import Optional, Literal, List

UNKNOWN = "unknown"

DeviceType = Literal["android", "ios", "windows_phone", "pc", "unknown"]

# Device types
ANDROID = "android"
IOS = "ios"
WINDOWS_PHONE = "windows_phone"
PC = "pc"

# OS names
OS_WINDOWS_PHONE = "Windows Phone"
OS_IOS = "iOS"
OS_ANDROID = "Android"
OS_WINDOWS = "Windows"
OS_MACOS = "macOS"
OS_LINUX = "Linux"

# Browser names
BROWSER_EDGE = "Edge"
BROWSER_OPERA = "Opera"
BROWSER_FIREFOX = "Firefox"
BROWSER_CHROME = "Chrome"
BROWSER_SAFARI = "Safari"
BROWSER_IE = "Internet Explorer"

# Engine names
ENGINE_BLINK = "Blink"
ENGINE_GECKO = "Gecko"
ENGINE_WEBKIT = "WebKit"
ENGINE_TRIDENT = "Trident"
ENGINE_PRESTO = "Presto"


class DeviceRecord(BaseModel):
    """Device facts. model/manufacturer are reserved and never detected."""

    type: DeviceType = UNKNOWN
    name: str = UNKNOWN
    model: str = UNKNOWN
    manufacturer: str = UNKNOWN

    class Config:
        frozen = True


class OSRecord(BaseModel):
    name: str = UNKNOWN
    version: Optional[str] = None
    architecture: Optional[str] = None  # reserved

    class Config:
        frozen = True


class BrowserRecord(BaseModel):
    name: str = UNKNOWN
    version: str = UNKNOWN

    class Config:
        frozen = True


class EngineRecord(BaseModel):
    name: str = UNKNOWN
    version: str = UNKNOWN

    class Config:
        frozen = True


class OSDevicePartial(BaseModel):
    """Output of the OS/device phase"""

    device: DeviceRecord = Field(default_factory=DeviceRecord)
    os: OSRecord = Field(default_factory=OSRecord)
    is_mobile: bool = False
    is_tablet: bool = False
    rule: Optional[str] = None  # name of the rule that fired

    class Config:
        frozen = True


class BrowserPartial(BaseModel):
    """Output of the browser/engine phase"""

    browser: BrowserRecord = Field(default_factory=BrowserRecord)
    engine: EngineRecord = Field(default_factory=EngineRecord)
    rule: Optional[str] = None

    class Config:
        frozen = True


class LegacyDeviceInfo(BaseModel):
    """
    Flat result shape.
    Unset optional fields stay None and are left out of to_dict().
    """

    type: DeviceType = UNKNOWN
    os: Optional[str] = None
    os_version: Optional[str] = Field(None, alias="osVersion")
    is_tablet: bool = Field(False, alias="isTablet")
    is_mobile: bool = Field(False, alias="isMobile")
    browser: Optional[str] = None
    version: Optional[str] = None

    class Config:
        frozen = True
        populate_by_name = True

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ClassificationResult(BaseModel):
    """Nested result shape plus the mobile/tablet flags."""

    user_agent_string: str = Field("", alias="userAgentString")
    device: DeviceRecord = Field(default_factory=DeviceRecord)
    engine: EngineRecord = Field(default_factory=EngineRecord)
    os: OSRecord = Field(default_factory=OSRecord)
    browser: BrowserRecord = Field(default_factory=BrowserRecord)
    platform: str = UNKNOWN
    is_bot: bool = Field(False, alias="isBot")  # reserved, never detected
    is_mobile: bool = Field(False, alias="isMobile")
    is_tablet: bool = Field(False, alias="isTablet")

    class Config:
        frozen = True
        populate_by_name = True

    def to_nested(self) -> dict:
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"is_mobile", "is_tablet"},
        )

    def to_legacy(self) -> LegacyDeviceInfo:
        return LegacyDeviceInfo(
            type=self.device.type,
            os=None if self.os.name == UNKNOWN else self.os.name,
            os_version=self.os.version,
            is_tablet=self.is_tablet,
            is_mobile=self.is_mobile,
            browser=None if self.browser.name == UNKNOWN else self.browser.name,
            version=None if self.browser.version == UNKNOWN else self.browser.version,
        )


ResultShape = Literal["nested", "legacy"]


class ClassifyRequest(BaseModel):
    """Single item accepted by the classify endpoint"""

    user_agent: Optional[str] = ""
    platform: Optional[str] = None

    class Config:
        extra = "ignore"


class ClassifyResponse(BaseModel):
    status: str
    processed: int
    errors: int = 0
    results: List[dict] = []


def render(result: ClassificationResult, shape: ResultShape) -> dict:
    """Serialize a result in the requested shape"""
    if shape == "legacy":
        return result.to_legacy().to_dict()
    return result.to_nested()
