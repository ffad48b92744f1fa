"""Dev entry point: python -m fcm_operation."""
from fcm_operation.app import create_app
from fcm_operation.config import OperationConfig


def main() -> None:
    config = OperationConfig()
    app = create_app()
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
