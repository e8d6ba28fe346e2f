import os
from pathlib import Path

from django.core.wsgi import get_wsgi_application
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env")

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "recordsite.settings")
application = get_wsgi_application()
