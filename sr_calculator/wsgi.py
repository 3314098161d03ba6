#run: flask --app sr_calculator.wsgi run --port 3000 --debug
#run: python -m sr_calculator.wsgi

from __future__ import annotations

from sr_calculator.app import create_app

app = create_app()


if __name__ == "__main__":
    settings = app.config["SR_SETTINGS"]
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
