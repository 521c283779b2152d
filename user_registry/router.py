"""
Request Router

Maps a Lambda Function URL request onto the user APIs and maps each outcome
onto an HTTP status:

    POST                      -> create      201 / 400 / 409
    GET ?email=<non-blank>    -> point lookup 200 / 404
    GET                       -> list all    200
    anything else             -> 405

TransportError and any unexpected exception are logged and re-raised so the
Lambda runtime reports the invocation as failed.
"""

import base64
import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from .context import RegistryContext
from .exceptions import ConflictError, TransportError, ValidationError
from .models import User

logger = logging.getLogger(__name__)

EMAIL_QUERY_PARAM = "email"


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: Optional[str]) -> 'HttpMethod':
        """Map a raw method string onto the closed set of methods the router handles."""
        normalized = (raw or "").upper()
        if normalized == cls.GET.value:
            return cls.GET
        if normalized == cls.POST.value:
            return cls.POST
        return cls.OTHER


@dataclass(frozen=True)
class HttpRequest:
    method: HttpMethod
    raw_method: str = ""
    query: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> 'HttpRequest':
        """
        Build a request from a Lambda Function URL (payload v2.0) event.

        Args:
            event: Raw invocation event

        Returns:
            HttpRequest with the method parsed into HttpMethod
        """
        # any level may be present but null
        request_context = event.get("requestContext") or {}
        raw_method = (request_context.get("http") or {}).get("method") or ""
        body = event.get("body")
        if body is not None and event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body).decode("utf-8")
            except (ValueError, UnicodeDecodeError):
                # leave undecodable bodies for the JSON parser to reject
                logger.warning("Failed to base64-decode request body")
        return cls(
            method=HttpMethod.parse(raw_method),
            raw_method=raw_method,
            query=event.get("queryStringParameters") or {},
            body=body,
        )


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Optional[Any] = None

    def to_event(self) -> Dict[str, Any]:
        """Render the Function URL response dictionary."""
        response: Dict[str, Any] = {"statusCode": self.status_code}
        if self.body is not None:
            response["headers"] = {"Content-Type": "application/json"}
            response["body"] = json.dumps(self.body)
        return response


def parse_user(body: Optional[str]) -> User:
    """
    Parse a POST body into a User.

    Args:
        body: Raw JSON request body

    Returns:
        Validated User

    Raises:
        ValidationError: Body is missing, not a JSON object, or has no usable email
    """
    if not body:
        raise ValidationError("Request body is empty")
    try:
        return User.model_validate_json(body)
    except PydanticValidationError as e:
        errors = {
            ".".join(str(p) for p in err['loc']) or "body": err['msg']
            for err in e.errors()
        }
        raise ValidationError("Failed to unmarshal request payload", errors, e) from e


class Router:
    """Stateless dispatcher from HttpRequest to HttpResponse."""

    def __init__(self, context: RegistryContext):
        self.context = context
        self._dispatch: Dict[HttpMethod, Callable[[HttpRequest], HttpResponse]] = {
            HttpMethod.GET: self._get,
            HttpMethod.POST: self._create,
            HttpMethod.OTHER: self._method_not_allowed,
        }
        missing = set(HttpMethod) - set(self._dispatch)
        if missing:
            raise RuntimeError(f"No route for methods: {sorted(m.value for m in missing)}")

    def route(self, request: HttpRequest) -> HttpResponse:
        logger.debug(f"Routing {request.raw_method or '<none>'} request")
        return self._dispatch[request.method](request)

    def _create(self, request: HttpRequest) -> HttpResponse:
        try:
            user = parse_user(request.body)
        except ValidationError as e:
            logger.warning(f"Rejected create request: {e}")
            return HttpResponse(400)

        try:
            self.context.write_api.create_user(user)
        except ConflictError:
            logger.info(f"User {user.email} already exists")
            return HttpResponse(409)
        except TransportError as e:
            logger.error(f"Store failure during {e.describe_target('PutItem', user.email)}: {e}")
            raise

        return HttpResponse(201)

    def _get(self, request: HttpRequest) -> HttpResponse:
        # a blank email is treated the same as no email; others are looked up verbatim
        email = request.query.get(EMAIL_QUERY_PARAM) or ""
        if email.strip():
            return self._find_user(email)
        return self._list_users()

    def _find_user(self, email: str) -> HttpResponse:
        try:
            user = self.context.read_api.get_by_email(email)
        except TransportError as e:
            logger.error(f"Store failure during {e.describe_target('GetItem', email)}: {e}")
            raise

        if user is None:
            logger.info(f"User not found {email}")
            return HttpResponse(404)

        logger.info(f"Found user {email}")
        return HttpResponse(200, user.to_transport())

    def _list_users(self) -> HttpResponse:
        try:
            users = self.context.read_api.list_users()
        except TransportError as e:
            logger.error(f"Store failure during {e.describe_target('Scan')}: {e}")
            raise

        return HttpResponse(200, [user.to_transport() for user in users])

    def _method_not_allowed(self, request: HttpRequest) -> HttpResponse:
        logger.info(f"Method not allowed: {request.raw_method or '<none>'}")
        return HttpResponse(405)
