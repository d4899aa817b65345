from webinar_api.models.webinar import WebinarModel

__all__ = ["WebinarModel"]
