from pathlib import Path

from fastapi.templating import Jinja2Templates

from app.api.core.config import settings

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
email_templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

email_templates.env.globals["APP_NAME"] = settings.APP_NAME
email_templates.env.globals["FRONTEND_URL"] = settings.FRONTEND_URL
