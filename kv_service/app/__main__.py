"""Run the 'Key-Value'-app as process."""

from kv_service.services.extensions import print_status
from kv_service.app import app_factory, AppConfig


def main() -> None:
    """Build app from environment-configuration and serve."""
    config = AppConfig()
    app = app_factory(config)
    print_status(f"Server listening on {config.HOST}:{config.PORT}..")
    app.run(host=config.HOST, port=config.PORT, threaded=True)


if __name__ == "__main__":
    main()
