from fastapi import Request

from shorturl.services.shortener import URLService


def get_url_service(request: Request) -> URLService:
    """FastAPI dependency: the service built for this app in ``create_app``."""
    return request.app.state.url_service
