"""Run the booking API with uvicorn.

Usage:
    python -m booking.run_server
"""
import uvicorn

from booking.core import config


def main() -> None:
    config.validate_runtime_config()
    uvicorn.run(
        "booking.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
