""" WSGI entry point (gunicorn fundconnect.wsgi:app, flask --app fundconnect.wsgi) """

from .app import create_app


# Create app instance for Flask CLI
app = create_app()


if __name__ == "__main__":
    app.run(host = "0.0.0.0", port = 5000, threaded = True)
