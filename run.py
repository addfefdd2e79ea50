import uvicorn

from questboard.utils.logging import setup_logging

if __name__ == "__main__":
    setup_logging("questboard.log")
    uvicorn.run(
        "questboard.main:app", host="127.0.0.1", port=3012, log_config=None, log_level=None
    )
