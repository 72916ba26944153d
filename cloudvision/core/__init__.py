from cloudvision.core.gateway import ApiGateway
from cloudvision.core.http import HttpTransport
from cloudvision.core.routes import ROUTES, RestRoute
from cloudvision.core.transport import Transport

__all__ = ["ApiGateway", "HttpTransport", "ROUTES", "RestRoute", "Transport"]
