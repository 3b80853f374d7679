import logging

from flask import Blueprint, render_template, redirect, url_for, flash, request, g

from forms.organisation_forms import OrganisationInfoForm

logger = logging.getLogger(__name__)

pages_bp = Blueprint("pages", __name__)

DASHBOARD_CARDS = range(1, 7)

ORGANISATION_TABS = [
    ("info", "dashboard.pages.organisation.tabs.info"),
    ("hierarchy", "dashboard.pages.organisation.tabs.hierarchy"),
    ("users", "dashboard.pages.organisation.tabs.users"),
]

NAV_SECTIONS = [
    ("navigation.sections.management", [
        ("navigation.dashboard", "pages.dashboard"),
        ("navigation.organisation", "pages.organisation"),
    ]),
    ("navigation.sections.developer", [
        ("navigation.console", "pages.console"),
        ("navigation.documentation", "pages.documentation"),
    ]),
    ("navigation.sections.resources", [
        ("navigation.marketingToolkit", "pages.marketing_toolkit"),
    ]),
]

DOCUMENTATION_SECTIONS = ("gettingStarted", "apiReference", "sdksLibraries", "tutorials")


@pages_bp.context_processor
def inject_navigation():
    return {"nav_sections": NAV_SECTIONS}


@pages_bp.route("/")
def index():
    return redirect(url_for("pages.dashboard", **request.args))


@pages_bp.route("/dashboard")
def dashboard():
    return render_template("pages/dashboard.html", cards=DASHBOARD_CARDS)


@pages_bp.route("/organisation", methods=["GET", "POST"])
def organisation():
    tab = request.args.get("tab", "info")
    if tab not in dict(ORGANISATION_TABS):
        tab = "info"

    form = OrganisationInfoForm(g.t)
    if tab == "info" and form.validate_on_submit():
        logger.info("Organisation details saved for %s", form.organisation_name.data)
        flash(g.t("common.success"), "success")
        return redirect(url_for("pages.organisation", tab="info", locale=g.locale))

    return render_template("pages/organisation.html", form=form, tab=tab,
                           tabs=ORGANISATION_TABS)


@pages_bp.route("/console")
def console():
    return render_template("pages/console.html",
                           sections=("apiKeys", "webhooks", "logs"))


@pages_bp.route("/documentation")
def documentation():
    return render_template("pages/documentation.html", sections=DOCUMENTATION_SECTIONS)


@pages_bp.route("/marketing-toolkit")
def marketing_toolkit():
    return render_template("pages/marketing_toolkit.html")
