import logging
import azure.functions as func
from api import geocoding

logging.getLogger("urllib3").setLevel(logging.WARNING)

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

geocoding.register_routes(app)
