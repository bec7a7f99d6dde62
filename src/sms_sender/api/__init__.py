from sms_sender.api.routes import router

__all__ = ["router"]
