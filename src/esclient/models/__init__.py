from .search_models import ResponseEnvelope

__all__ = ["ResponseEnvelope"]
