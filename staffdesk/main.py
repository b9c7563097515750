from staffdesk.api.main import app

__all__ = ["app"]
