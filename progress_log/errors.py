# progress_log/errors.py

ERROR_PAGE = (
    "<!doctype html>\n"
    "<html><head><title>Server Error</title></head>"
    "<body><h1>Server Error</h1><p>The progress log is unavailable right now.</p></body></html>"
)


class ProgressLogError(Exception):
    """Base class for every failure the app knows how to report."""


class StorageError(ProgressLogError):
    """Connection could not be acquired or a statement failed."""


class RenderError(ProgressLogError):
    """The index template failed to render."""


class StartupError(ProgressLogError):
    """Storage is unusable at startup; the process must not serve."""


def register_error_handlers(app):
    @app.errorhandler(StorageError)
    def handle_storage_error(exc):
        app.logger.exception("Storage failure while handling request: %s", exc)
        return ERROR_PAGE, 500, {"Content-Type": "text/html; charset=utf-8"}

    @app.errorhandler(RenderError)
    def handle_render_error(exc):
        app.logger.exception("Rendering failure while handling request: %s", exc)
        return ERROR_PAGE, 500, {"Content-Type": "text/html; charset=utf-8"}
