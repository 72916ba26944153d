from decouple import config
from pydantic import BaseModel, Field, model_validator

# Configuration for accessing the Vision service
DEFAULT_VISION_API = "https://vision.googleapis.com"
VISION_API_ENDPOINT = config("VISION_API_ENDPOINT", default=DEFAULT_VISION_API)
VISION_ACCESS_TOKEN = config("VISION_ACCESS_TOKEN", default=None)
VISION_PROJECT_ID = config("VISION_PROJECT_ID", default=None)
VISION_VERIFY_SSL = config("VISION_VERIFY_SSL", cast=bool, default=True)
VISION_REQUEST_TIMEOUT = config("VISION_REQUEST_TIMEOUT", cast=float, default=60.0)

# Long-running operation polling, values in seconds
VISION_POLL_INITIAL_DELAY = config("VISION_POLL_INITIAL_DELAY", cast=float, default=0.1)
VISION_POLL_MULTIPLIER = config("VISION_POLL_MULTIPLIER", cast=float, default=1.3)
VISION_POLL_MAX_DELAY = config("VISION_POLL_MAX_DELAY", cast=float, default=60.0)
VISION_POLL_TOTAL_TIMEOUT = config("VISION_POLL_TOTAL_TIMEOUT", cast=float, default=600.0)

# Log configuration
LOG_LEVEL: str = config("LOG_LEVEL", default="INFO").upper()
LOG_FORMAT: str = config("LOG_FORMAT", default="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
LOG_DATETIME_FORMAT: str = config("LOG_DATETIME_FORMAT", default="%Y-%m-%d %H:%M:%S")


class PollingSettings(BaseModel):
    """
    Settings for polling a long-running operation.

    Polling settings are immutable; if you need to change a setting, create a copy with
    `model_copy(update=...)`.

    Attributes:
        initial_delay:
            Seconds to wait before the first poll.
        multiplier:
            Factor applied to the delay after every poll. 1.0 polls at a fixed interval.
        max_delay:
            Upper bound in seconds for the delay between two polls.
        total_timeout:
            Maximum number of seconds to wait for the operation to complete.
            None waits forever.
        max_attempts:
            Maximum number of polls before giving up. None only relies on `total_timeout`.
    """

    model_config = {"frozen": True}

    initial_delay: float = Field(default=VISION_POLL_INITIAL_DELAY, ge=0)
    multiplier: float = Field(default=VISION_POLL_MULTIPLIER, ge=1.0)
    max_delay: float = Field(default=VISION_POLL_MAX_DELAY, ge=0)
    total_timeout: float | None = Field(default=VISION_POLL_TOTAL_TIMEOUT, gt=0)
    max_attempts: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _validate_delays(self) -> "PollingSettings":
        if self.max_delay < self.initial_delay:
            raise ValueError(
                f"max_delay ({self.max_delay}) must not be smaller than initial_delay ({self.initial_delay})"
            )
        return self

    def delays(self):
        """Yield the delays to sleep before each poll."""
        delay = self.initial_delay
        while True:
            yield delay
            delay = min(delay * self.multiplier, self.max_delay)


class VisionConfig(BaseModel):
    """
    Configuration for connecting to the Vision API.

    Args:
        host (str): The API endpoint, e.g. "https://vision.googleapis.com".
        access_token (str | None): An OAuth2 bearer token sent with every request.
        project_id (str | None): Default project used by the examples and path helpers.
        verify_ssl (bool): Whether or not to verify SSL certificates (default: True).
        request_timeout (float): Timeout in seconds of a single HTTP request.
        polling (PollingSettings): Defaults for polling long-running operations.
    """

    host: str = Field(default=DEFAULT_VISION_API, description="Vision API endpoint.")
    access_token: str | None = Field(default=None, description="Bearer token for the Vision API.")
    project_id: str | None = Field(default=None)
    verify_ssl: bool = Field(default=True)
    request_timeout: float = Field(default=60.0, gt=0)
    polling: PollingSettings = Field(default_factory=PollingSettings)

    @model_validator(mode="after")
    def _normalize_host(self) -> "VisionConfig":
        # plain host names like "vision.googleapis.com" are served over https
        self.host = self.host.strip()
        if "://" not in self.host:
            self.host = f"https://{self.host}"
        self.host = self.host.rstrip("/")
        return self


# default config to be used by the SDK if no other explict config is provided
default_config = VisionConfig(
    host=VISION_API_ENDPOINT,
    access_token=VISION_ACCESS_TOKEN,
    project_id=VISION_PROJECT_ID,
    verify_ssl=VISION_VERIFY_SSL,
    request_timeout=VISION_REQUEST_TIMEOUT,
)
