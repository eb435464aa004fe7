# progress_log/routes/entries.py

from flask import Blueprint, render_template, redirect, url_for, abort, current_app
from jinja2 import TemplateError

from progress_log import limiter
from progress_log.errors import RenderError
from progress_log.forms import EntryForm, DeleteEntryForm
from progress_log.models.log_entry import local_timestamp

entries_bp = Blueprint("entries", __name__)


def _repository():
    return current_app.extensions["entry_repository"]


def _render_index(entries):
    try:
        return render_template(
            "index.html",
            entries=entries,
            form=EntryForm(),
            default_created_at=local_timestamp(),
        )
    except TemplateError as exc:
        raise RenderError(str(exc)) from exc


# ----- LIST -----
@entries_bp.route("/", methods=["GET"])
def index():
    entries = _repository().list()
    return _render_index(entries)


# ----- ADD -----
@entries_bp.route("/add", methods=["POST"])
@limiter.limit(lambda: current_app.config["ADD_RATE_LIMIT"])
def add_entry():
    form = EntryForm()
    if not form.validate():
        abort(400, description="Field 'text' is required.")

    # Blank or whitespace-only timestamps fall back to server-local time.
    created_at = form.created_at.data
    if not (created_at or "").strip():
        created_at = local_timestamp()
    _repository().add(form.text.data, created_at)
    return redirect(url_for("entries.index"), code=303)


# ----- DELETE -----
@entries_bp.route("/delete", methods=["POST"])
def delete_entry():
    form = DeleteEntryForm()
    if not form.validate():
        abort(400, description="Field 'id' must be an integer.")

    _repository().delete(form.id.data)
    return redirect(url_for("entries.index"), code=303)
