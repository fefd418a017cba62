import sys
import os

# Pfade sofort setzen, nicht erst in einer Fixture!
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
paths = [
    os.path.join(BASE_DIR, 'alexa-skill-http-switch', 'src'),
    os.path.join(BASE_DIR, 'tests')
]

for p in paths:
    if p not in sys.path:
        sys.path.insert(0, p)

# boto3 braucht Region und Credentials, auch wenn der Stubber antwortet
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("DEVICE_TABLE", "alexa_home_switch_devices")
