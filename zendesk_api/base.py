"""
Zendesk HTTP client base: authentication header, request primitives,
query-string building and the exception hierarchy
"""
import base64
import logging
from typing import Dict, List, Any, Optional, Union
from urllib.parse import urlencode

import requests
from pydantic import BaseModel

from zendesk_api.core.config import get_settings

logger = logging.getLogger(__name__)


class ZendeskError(Exception):
    """Base exception for Zendesk client errors"""
    pass


class AuthenticationError(ZendeskError):
    """Exception raised when the client is unconfigured or credentials are rejected"""
    pass


class RateLimitError(ZendeskError):
    """Exception raised on HTTP 429. The request is not retried."""

    def __init__(self, message: str, retry_after: Optional[int] = None):
        super().__init__(message)
        self.retry_after = retry_after


class ZendeskAPIError(ZendeskError):
    """Exception raised for any other non-success HTTP status"""

    def __init__(self, status_code: int, body: str, url: str = ""):
        super().__init__(f"Zendesk API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body
        self.url = url


class CustomFieldTypeError(ZendeskError, ValueError):
    """Exception raised when a custom field value is not null, bool, str or a list of str"""

    def __init__(self, value: Any):
        self.value_type = type(value).__name__
        super().__init__(f"{self.value_type} is an invalid type for custom field value")


def _is_empty(value: Any) -> bool:
    # 0 is a real value, e.g. start_time=0 exports from the beginning
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def add_options(path: str, options: Optional[Union[BaseModel, Dict[str, Any]]]) -> str:
    """
    Append an options object to a path as a query string

    Fields that are None or empty are left out, zero is sent. Commas stay
    unescaped so list-valued parameters read as ``ids=1,2,3``.
    """
    if options is None:
        return path

    if isinstance(options, BaseModel):
        values = options.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        values = dict(options)

    params = {key: value for key, value in values.items() if not _is_empty(value)}
    if not params:
        return path

    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{urlencode(params, safe=',')}"


class IncludeBuilder:
    """Collects sideload keys and renders them as a single include parameter"""

    def __init__(self):
        self.keys: List[str] = []

    def add_key(self, key: str) -> None:
        self.keys.append(key)

    def path(self, base: str) -> str:
        if not self.keys:
            return base
        return add_options(base, {"include": ",".join(self.keys)})


class ZendeskClientBase:
    """
    Zendesk API request primitives shared by the resource mixins

    Every call is a single blocking round trip: no retries, no backoff and
    no rate limiting happen here.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        if config is None:
            config = get_settings().zendesk_config
            logger.warning("ZendeskClient initialized with environment config")
        else:
            config = dict(config)
            # Accept the field name used by stored integration configs
            if "api_token" in config and "token" not in config:
                config["token"] = config["api_token"]

        self.config = config
        self.is_enabled = self._validate_config()
        self.timeout = float(config.get("timeout") or 30.0)

        if self.config.get("base_url"):
            self.api_url = self.config["base_url"].rstrip("/")
        elif self.config.get("subdomain"):
            self.api_url = f"https://{self.config['subdomain']}.zendesk.com/api/v2"
        else:
            self.api_url = ""

        self.session = requests.Session()
        if self.is_enabled:
            self.session.headers.update({
                "Authorization": self._create_auth_header(),
                "Content-Type": "application/json",
                "Accept": "application/json"
            })

    def _validate_config(self) -> bool:
        """Validate Zendesk configuration"""
        missing_fields = [field for field in ("email", "token") if not self.config.get(field)]
        if not (self.config.get("subdomain") or self.config.get("base_url")):
            missing_fields.insert(0, "subdomain")

        if missing_fields:
            logger.warning(f"Missing Zendesk config fields: {missing_fields}")
            return False

        return True

    def _create_auth_header(self) -> str:
        """Create Basic Auth header for API token access"""
        # Format: email/token:token
        auth_string = f"{self.config['email']}/token:{self.config['token']}"
        encoded_auth = base64.b64encode(auth_string.encode()).decode()
        return f"Basic {encoded_auth}"

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.api_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None
    ) -> bytes:
        """
        Send one request and return the raw response body

        Raises:
            AuthenticationError: client not configured, or HTTP 401
            RateLimitError: HTTP 429
            ZendeskAPIError: any other status >= 400
            requests.exceptions.RequestException: transport failures, unchanged
        """
        if not self.is_enabled:
            raise AuthenticationError("Zendesk client not properly configured")

        url = self._url(path)
        kwargs: Dict[str, Any] = {"timeout": timeout if timeout is not None else self.timeout}
        if payload is not None:
            kwargs["json"] = payload

        logger.debug(f"{method} {url}")
        response = self.session.request(method, url, **kwargs)

        if response.status_code == 401:
            logger.error(f"Zendesk rejected credentials for {method} {url}")
            raise AuthenticationError("Invalid Zendesk credentials")

        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            logger.error(f"Zendesk rate limit hit for {method} {url} (Retry-After: {retry_after})")
            raise RateLimitError(
                "Zendesk rate limit exceeded",
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None
            )

        if response.status_code >= 400:
            logger.error(f"Zendesk API error {response.status_code} for {method} {url}: {response.text}")
            raise ZendeskAPIError(response.status_code, response.text, url=url)

        return response.content

    def get(self, path: str, timeout: Optional[float] = None) -> bytes:
        return self._request("GET", path, timeout=timeout)

    def post(self, path: str, payload: Dict[str, Any], timeout: Optional[float] = None) -> bytes:
        return self._request("POST", path, payload=payload, timeout=timeout)

    def put(self, path: str, payload: Dict[str, Any], timeout: Optional[float] = None) -> bytes:
        return self._request("PUT", path, payload=payload, timeout=timeout)

    def test_connection(self) -> bool:
        """Test connection to Zendesk API"""
        if not self.is_enabled:
            return False

        try:
            self.get("/users/me.json")
            return True
        except (ZendeskError, requests.exceptions.RequestException) as e:
            logger.error(f"Zendesk connection test failed: {e}")
            return False
