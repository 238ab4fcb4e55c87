import os
import warnings

from dotenv import load_dotenv

load_dotenv()

SQLALCHEMY_DATABASE_URL = os.environ.get('SQLALCHEMY_DATABASE_URL', 'sqlite:///./salon.db')

JWT_SECRET = os.environ.get('JWT_SECRET')
if not JWT_SECRET:
    warnings.warn('JWT_SECRET not set! Using insecure default - DO NOT USE IN PRODUCTION', RuntimeWarning,
                  stacklevel=2)
    JWT_SECRET = 'INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION'

JWT_ALGORITHM = 'HS256'
JWT_EXPIRE_SECONDS = int(os.environ.get('JWT_EXPIRE_SECONDS', 60 * 60 * 24))

# dev / test / prod
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
