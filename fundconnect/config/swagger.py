""" Swagger configuration defined here... """

# Python Packages
from flask_restx import Api

# Constants
from ..base import constants





# Swagger authorization for the API (session cookie issued by /api/auth/sign-in)
authorizations = {
    'Session Cookie' : {
        'type' : 'apiKey',
        'in' : 'cookie',
        'name' : 'session'
    }
}

if constants.APP_ENV != "production":
    doc = '/swagger/'
else:
    doc = False


def create_api():
    """
    Swagger Configuration

    One Api object per application, so the namespaces can be mounted on
    every app the factory builds.
    """

    return Api(
        authorizations = authorizations,
        title = constants.SWAGGER_APP_PROPS['name'],
        version = constants.SWAGGER_APP_PROPS['version'],
        description = constants.SWAGGER_APP_PROPS['description'],
        prefix = '/api',
        doc = doc
    )
