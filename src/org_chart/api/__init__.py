from .responses import bad_request, make_error_response
from .error_handlers import register_exception_handlers

__all__ = ["bad_request", "make_error_response", "register_exception_handlers"]
