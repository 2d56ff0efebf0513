import os
from dotenv import load_dotenv
from pathlib import Path

# First get the environment from ENV variable or default to 'development'
ENV = os.getenv('ENV', 'development')

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Load the appropriate .env file based on environment
def load_env_file():
    # First try to load .env.{ENV} file
    env_file = BASE_DIR / f".env.{ENV}"
    if env_file.exists():
        print(f"Loading environment from {env_file}")
        load_dotenv(dotenv_path=env_file, override=True)
        return True

    # Fallback to the standard .env file
    default_env_file = BASE_DIR / ".env"
    if default_env_file.exists():
        print(f"Loading environment from {default_env_file}")
        load_dotenv(dotenv_path=default_env_file, override=True)
        return True

    return False

# Load environment variables
env_file_loaded = load_env_file()


# Main
title=os.getenv("title_DIGILIMA", "DigiLima Site API")
description=os.getenv("description_DIGILIMA", "Contact form relay for digilima.com")
version=os.getenv("version_DIGILIMA", "1.0.0")

API_PREFIX=os.getenv('DIGILIMA_API_PREFIX', '/api')
HOST=os.getenv('DIGILIMA_HOST', '0.0.0.0')
PORT=int(os.getenv('DIGILIMA_PORT', '8000'))
LOG_LEVEL=os.getenv('DIGILIMA_LOG_LEVEL', 'INFO')
DEBUG=os.getenv('DIGILIMA_DEBUG', 'false').lower() in ('true', '1', 'yes', 'on')

# Transactional email (Resend)
RESEND_API_KEY=os.getenv('RESEND_API_KEY')
RESEND_API_URL=os.getenv('RESEND_API_URL', 'https://api.resend.com')
EMAIL_TIMEOUT=float(os.getenv('EMAIL_TIMEOUT', '30'))

# Contact pipeline addresses
CONTACT_TO_EMAIL=os.getenv('CONTACT_TO_EMAIL', 'hello@digilima.com')
CONTACT_FROM_EMAIL=os.getenv('CONTACT_FROM_EMAIL', 'DigiLima Contact Form <noreply@digilima.com>')
AUTO_REPLY_FROM_EMAIL=os.getenv('AUTO_REPLY_FROM_EMAIL', 'DigiLima <hello@digilima.com>')

# Brand details rendered into the email documents
BRAND_NAME=os.getenv('BRAND_NAME', 'DigiLima')
SUPPORT_EMAIL=os.getenv('SUPPORT_EMAIL', 'hello@digilima.com')
SUPPORT_PHONE=os.getenv('SUPPORT_PHONE', '+357 99 123 456')
SITE_URL=os.getenv('SITE_URL', 'https://digilima.com')
BUSINESS_LOCATION=os.getenv('BUSINESS_LOCATION', 'Limassol, Cyprus')
BUSINESS_TIMEZONE=os.getenv('BUSINESS_TIMEZONE', 'Europe/Athens')
