from flask import Request
from werkzeug.exceptions import BadRequest


class MalformedJSON(BadRequest):
    description = "JSON inválido"


class TaskRequest(Request):
    """Request that reports unparsable JSON bodies as ``MalformedJSON``."""

    def on_json_loading_failed(self, e):
        raise MalformedJSON() from e

    def json_body(self):
        # An empty body reads as {}; the content type is not checked.
        if not self.get_data(cache=True):
            return {}
        return self.get_json(force=True)
