"""MediTrack web application.

This module exposes the Flask application that serves the landing page, the
dashboard, and the appointment and prescription pages. Each signed-in browser
session works on its own in-memory workspace seeded with sample records;
nothing is persisted, so restarting the process starts everyone over.
"""
from __future__ import annotations

import argparse
import io
import logging
import os
from datetime import date, time
from typing import Any, List, Mapping, MutableMapping, Optional

from flask import (
    Flask,
    Response,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    send_file,
    url_for,
)
from jinja2 import DictLoader

from records import RecordError
from records.workspace import DEFAULT_MAX_WORKSPACES as WORKSPACE_LIMIT, Workspace, WorkspaceRegistry
from services import appointments as appointment_service
from services import prescriptions as prescription_service
from services.dashboard import build_dashboard_context
from services.fields import optional_text, require_text
from services.reports import build_health_summary
from ui.auth import (
    User,
    current_user,
    current_workspace_key,
    login_required,
    login_user,
    logout_user,
)
from ui.templates import TEMPLATES

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
REGISTRY_EXTENSION = "meditrack.workspaces"

DEFAULT_SECRET_KEY = os.getenv("MEDITRACK_SECRET_KEY", "dev-secret-key")
DEFAULT_SEED_DATA = os.getenv("MEDITRACK_SEED_DATA", "1").strip().lower() not in {"0", "false", "no"}
DEFAULT_MAX_WORKSPACES = int(os.getenv("MEDITRACK_MAX_WORKSPACES", str(WORKSPACE_LIMIT)))
DEFAULT_LOG_LEVEL = os.getenv("MEDITRACK_LOG_LEVEL", "INFO")
DEFAULT_HOST = os.getenv("HOST", "0.0.0.0")
DEFAULT_PORT = int(os.getenv("PORT", "5000"))

FEATURES = [
    {
        "icon": "calendar",
        "title": "Smart Scheduling",
        "description": "Book and manage appointments with ease, never miss a medical visit again.",
    },
    {
        "icon": "capsule",
        "title": "Medication Tracking",
        "description": "Keep track of all your prescriptions, dosages, and medication schedules.",
    },
    {
        "icon": "shield-check",
        "title": "Secure & Private",
        "description": "Your health data is protected with enterprise-grade security measures.",
    },
    {
        "icon": "clock",
        "title": "Real-time Updates",
        "description": "Get instant notifications about appointments and medication reminders.",
    },
    {
        "icon": "people",
        "title": "Multi-user Support",
        "description": "Manage health records for your entire family in one convenient place.",
    },
    {
        "icon": "heart",
        "title": "Health Insights",
        "description": "Track your health journey with comprehensive dashboards and reports.",
    },
]

NAV_LINKS = [
    ("dashboard", "Dashboard"),
    ("appointments", "Appointments"),
    ("prescriptions", "Prescriptions"),
]

APPOINTMENT_BADGES = {"scheduled": "primary", "completed": "success", "cancelled": "danger"}
PRESCRIPTION_BADGES = {"active": "success", "completed": "primary", "discontinued": "danger"}


def display_date(value: Optional[date]) -> str:
    if value is None:
        return "—"
    return f"{value:%b} {value.day}, {value.year}"


def display_time(value: Optional[time]) -> str:
    if value is None:
        return "—"
    return value.strftime("%H:%M")


def notify(title: str, description: str, category: str = "success") -> None:
    """Queue a toast for the next rendered page."""

    flash({"title": title, "description": description}, category)


def current_workspace() -> Workspace:
    registry: WorkspaceRegistry = current_app.extensions[REGISTRY_EXTENSION]
    return registry.get(current_workspace_key() or "")


def _start_session(user: User) -> None:
    registry: WorkspaceRegistry = current_app.extensions[REGISTRY_EXTENSION]
    registry.discard(current_workspace_key())
    login_user(user)


def _safe_next(target: Optional[str]) -> Optional[str]:
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


def index() -> str:
    return render_template("landing.html", features=FEATURES)


def login() -> Any:
    next_url = _safe_next(request.args.get("next"))
    if request.method == "POST":
        try:
            email = require_text(request.form.get("email"), "email")
        except RecordError as exc:
            notify("Sign in failed", str(exc), "danger")
            return render_template("login.html", next_url=next_url), 400
        user = User(email=email, first_name=optional_text(request.form.get("first_name")))
        _start_session(user)
        logger.info("Signed in %s", user.email)
        return redirect(next_url or url_for("dashboard"))
    return render_template("login.html", next_url=next_url)


def register() -> Any:
    if request.method == "POST":
        try:
            user = User(
                first_name=require_text(request.form.get("first_name"), "first_name"),
                last_name=require_text(request.form.get("last_name"), "last_name"),
                email=require_text(request.form.get("email"), "email"),
            )
        except RecordError as exc:
            notify("Registration failed", str(exc), "danger")
            return render_template("register.html"), 400
        _start_session(user)
        logger.info("Registered %s", user.email)
        notify("Welcome to MediTrack!", f"Your account is ready, {user.display_name}.")
        return redirect(url_for("dashboard"))
    return render_template("register.html")


def logout() -> Response:
    registry: WorkspaceRegistry = current_app.extensions[REGISTRY_EXTENSION]
    registry.discard(logout_user())
    notify("Signed out", "You have been signed out.", "secondary")
    return redirect(url_for("index"))


@login_required
def dashboard() -> str:
    user = current_user()
    context = build_dashboard_context(current_workspace(), user.display_name if user else "")
    return render_template("dashboard.html", **context)


@login_required
def health_summary() -> Response:
    user = current_user()
    pdf_bytes = build_health_summary(current_workspace(), user.full_name if user else "")
    return send_file(
        io.BytesIO(pdf_bytes),
        mimetype="application/pdf",
        as_attachment=True,
        download_name="health-summary.pdf",
    )


@login_required
def appointments() -> Any:
    store = current_workspace().appointments
    if request.method == "POST":
        form = request.form
        try:
            appointment_service.book_appointment(
                form.get("doctor_name", ""),
                form.get("appointment_date", ""),
                form.get("appointment_time", ""),
                form.get("reason", ""),
                store=store,
            )
        except RecordError as exc:
            logger.warning("Rejected appointment booking: %s", exc)
            notify("Could not book appointment", str(exc), "danger")
        else:
            notify("Appointment booked!", "Your appointment has been scheduled successfully.")
        return redirect(url_for("appointments"))

    upcoming, past = appointment_service.split_appointments(store.all())
    return render_template("appointments.html", upcoming=upcoming, past=past)


@login_required
def cancel_appointment(appointment_id: int) -> Response:
    try:
        appointment_service.cancel_appointment(appointment_id, store=current_workspace().appointments)
    except RecordError as exc:
        logger.warning("Rejected appointment cancellation: %s", exc)
        notify("Could not cancel appointment", str(exc), "danger")
    else:
        notify("Appointment cancelled", "Your appointment has been cancelled.")
    return redirect(url_for("appointments"))


@login_required
def complete_appointment(appointment_id: int) -> Response:
    try:
        appointment_service.complete_appointment(appointment_id, store=current_workspace().appointments)
    except RecordError as exc:
        logger.warning("Rejected appointment completion: %s", exc)
        notify("Could not complete appointment", str(exc), "danger")
    else:
        notify("Appointment completed", "The appointment has been marked as completed.")
    return redirect(url_for("appointments"))


@login_required
def prescriptions() -> Any:
    store = current_workspace().prescriptions
    if request.method == "POST":
        form = request.form
        try:
            prescription_service.add_prescription(
                form.get("medicine_name", ""),
                form.get("dosage", ""),
                form.get("frequency", ""),
                form.get("start_date", ""),
                form.get("end_date", ""),
                form.get("instructions", ""),
                store=store,
            )
        except RecordError as exc:
            logger.warning("Rejected prescription: %s", exc)
            notify("Could not add prescription", str(exc), "danger")
        else:
            notify("Prescription added!", "Your prescription has been added successfully.")
        return redirect(url_for("prescriptions"))

    active, inactive = prescription_service.split_prescriptions(store.all())
    return render_template("prescriptions.html", active=active, inactive=inactive)


@login_required
def discontinue_prescription(prescription_id: int) -> Response:
    try:
        prescription_service.discontinue_prescription(
            prescription_id, store=current_workspace().prescriptions
        )
    except RecordError as exc:
        logger.warning("Rejected prescription discontinuation: %s", exc)
        notify("Could not discontinue prescription", str(exc), "danger")
    else:
        notify("Prescription discontinued", "The prescription has been discontinued.")
    return redirect(url_for("prescriptions"))


@login_required
def complete_prescription(prescription_id: int) -> Response:
    try:
        prescription_service.complete_prescription(
            prescription_id, store=current_workspace().prescriptions
        )
    except RecordError as exc:
        logger.warning("Rejected prescription completion: %s", exc)
        notify("Could not complete prescription", str(exc), "danger")
    else:
        notify("Prescription completed", "The prescription has been marked as completed.")
    return redirect(url_for("prescriptions"))


@login_required
def api_appointments() -> Response:
    """Return the session's appointments as JSON."""
    return jsonify([record.to_dict() for record in current_workspace().appointments.all()])


@login_required
def api_prescriptions() -> Response:
    """Return the session's prescriptions as JSON."""
    return jsonify([record.to_dict() for record in current_workspace().prescriptions.all()])


ROUTES = [
    ("/", index, ("GET",)),
    ("/login", login, ("GET", "POST")),
    ("/register", register, ("GET", "POST")),
    ("/logout", logout, ("POST",)),
    ("/dashboard", dashboard, ("GET",)),
    ("/dashboard/health-summary.pdf", health_summary, ("GET",)),
    ("/appointments", appointments, ("GET", "POST")),
    ("/appointments/<int:appointment_id>/cancel", cancel_appointment, ("POST",)),
    ("/appointments/<int:appointment_id>/complete", complete_appointment, ("POST",)),
    ("/prescriptions", prescriptions, ("GET", "POST")),
    ("/prescriptions/<int:prescription_id>/discontinue", discontinue_prescription, ("POST",)),
    ("/prescriptions/<int:prescription_id>/complete", complete_prescription, ("POST",)),
    ("/api/appointments", api_appointments, ("GET",)),
    ("/api/prescriptions", api_prescriptions, ("GET",)),
]


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the application, applying ``config`` over the environment defaults."""

    flask_app = Flask(__name__)
    flask_app.config.update(
        SECRET_KEY=DEFAULT_SECRET_KEY,
        MEDITRACK_SEED_DATA=DEFAULT_SEED_DATA,
        MEDITRACK_MAX_WORKSPACES=DEFAULT_MAX_WORKSPACES,
    )
    if config:
        flask_app.config.update(config)

    flask_app.extensions[REGISTRY_EXTENSION] = WorkspaceRegistry(
        seed=bool(flask_app.config["MEDITRACK_SEED_DATA"]),
        max_workspaces=int(flask_app.config["MEDITRACK_MAX_WORKSPACES"]),
    )

    flask_app.jinja_loader = DictLoader(TEMPLATES)
    flask_app.jinja_env.filters["display_date"] = display_date
    flask_app.jinja_env.filters["display_time"] = display_time
    flask_app.jinja_env.globals.update(
        nav_links=NAV_LINKS,
        appointment_badges=APPOINTMENT_BADGES,
        prescription_badges=PRESCRIPTION_BADGES,
    )

    @flask_app.context_processor
    def inject_user() -> MutableMapping[str, object]:
        return {"current_user": current_user()}

    for rule, view, methods in ROUTES:
        flask_app.add_url_rule(rule, endpoint=view.__name__, view_func=view, methods=list(methods))

    return flask_app


app = create_app()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MediTrack web application")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to listen on")
    parser.add_argument("--debug", action="store_true", help="Enable the Flask debugger and reloader")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=DEFAULT_LOG_LEVEL.upper(), format=LOG_FORMAT)
    logger.info("Starting MediTrack on %s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
