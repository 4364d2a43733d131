from __future__ import annotations

import logging
from datetime import date

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date, today_local
from ..core.constants import (
    ISO_DATE_FORMAT,
    MSG_BAD_REQUEST,
    MSG_CHECK_IN_FAILED,
    MSG_CHECK_OUT_FAILED,
    MSG_EXPORT_FAILED,
    MSG_INVALID_DATE,
)
from ..container import Container
from ..tracker.controller import TrackerController
from ..tracker.view import RowAction, build_rows, summarize

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _selected_date() -> date:
        value = request.values.get("date")
        if not value:
            return today_local()
        try:
            return parse_iso_date(value)
        except ValueError:
            flash(MSG_INVALID_DATE, "warning")
            return today_local()

    def _back_to(day: date):
        return redirect(url_for("index", date=day.strftime(ISO_DATE_FORMAT)))

    def _render(tracker: TrackerController):
        state = tracker.state
        return render_template(
            "index.html",
            state=state,
            selected_date=state.selected_date.strftime(ISO_DATE_FORMAT),
            rows=build_rows(state, time_format=container.time_format),
            summary=summarize(state),
            RowAction=RowAction,
        )

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        tracker = container.tracker(_selected_date())
        tracker.refresh()
        if request.args.get("add"):
            tracker.open_add_employee()
        return _render(tracker)

    @app.route("/checkin", methods=["POST"], endpoint="checkin")
    def checkin():
        day = _selected_date()
        try:
            tracker = container.tracker(day)
            if not tracker.check_in(int(request.form["employee_id"])):
                flash(tracker.state.alert, "danger")
        except (KeyError, ValueError):
            flash(MSG_BAD_REQUEST, "danger")
        except Exception:
            logger.exception("Unexpected error during check-in")
            flash(MSG_CHECK_IN_FAILED, "danger")
        return _back_to(day)

    @app.route("/checkout", methods=["POST"], endpoint="checkout")
    def checkout():
        day = _selected_date()
        try:
            tracker = container.tracker(day)
            if not tracker.check_out(int(request.form["record_id"])):
                flash(tracker.state.alert, "danger")
        except (KeyError, ValueError):
            flash(MSG_BAD_REQUEST, "danger")
        except Exception:
            logger.exception("Unexpected error during check-out")
            flash(MSG_CHECK_OUT_FAILED, "danger")
        return _back_to(day)

    @app.route("/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        day = _selected_date()
        tracker = container.tracker(day)
        tracker.open_add_employee()
        tracker.update_draft(
            name=request.form.get("name", ""),
            email=request.form.get("email", ""),
            employee_id=request.form.get("employee_id", ""),
        )
        if tracker.submit_employee():
            return _back_to(day)

        # Keep the form open with the operator's input.
        tracker.refresh()
        return _render(tracker), 400

    @app.route("/export.csv", methods=["GET"], endpoint="export_csv")
    def export_csv():
        day = _selected_date()
        tracker = container.tracker(day)
        if tracker.refresh_records().records_failed:
            flash(MSG_EXPORT_FAILED, "danger")
            return _back_to(day)
        export = tracker.export_csv()
        return app.response_class(
            export.content,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )
