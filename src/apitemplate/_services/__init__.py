from .api_template_service import ApiTemplateService

__all__ = ["ApiTemplateService"]
