# WSGI entry point
import os

os.environ.setdefault('FLASK_ENV', 'production')

from dashboard import create_app

app = create_app(os.environ['FLASK_ENV'])

application = app
