import uvicorn
from menu.api.api_run import app
from menu.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


if __name__ == "__main__":
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Weekly menu API on http://localhost:{APP_PORT}/api/plan (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL)
