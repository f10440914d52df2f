import uvicorn
from weekmenu.api.api_run import app
from weekmenu.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from weekmenu.utilities.logging_config import configure_logging


def run():
    configure_logging(LOG_LEVEL)
    local_url = f"http://localhost:{APP_PORT}"
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    run()
