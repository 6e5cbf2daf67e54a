"""Entry point for running the NiceGUI sketch slider demo."""

from sketchslider.app import run, settings


if __name__ == "__main__":
    run(reload=False, host=settings.host, port=settings.ui_port)
