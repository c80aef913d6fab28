"""Navbar component for application header."""

import dash_bootstrap_components as dbc
from dash import html
from config.settings import APP_CONFIG, UI_CONFIG

NAV_LINKS = [
    ("Context", "#context"),
    ("Data", "#data"),
    ("About", "#about"),
]


def nav_link_ids():
    """Component ids of the mobile navigation links."""
    return [f"mobile-nav-link-{index}" for index in range(len(NAV_LINKS))]


def create_navbar():
    """
    Creates the page header with the burger toggle and the mobile navigation
    panel. The panel starts hidden; the burger and the close button toggle it
    and any link inside it closes it.

    Returns:
        dbc.Navbar: Configured navbar component
    """
    text_style = {
        "font-family": 'Open Sans',
        "font-weight": UI_CONFIG["font_weight"]
    }

    links = [
        dbc.NavItem(dbc.NavLink(label, href=href, id=link_id, n_clicks=0, external_link=True))
        for (label, href), link_id in zip(NAV_LINKS, nav_link_ids())
    ]

    close_button = dbc.Button(
        "×",
        id="mobile-nav-close",
        color="link",
        className="close-button text-white d-lg-none",
        n_clicks=0,
    )

    return dbc.Navbar(
        dbc.Container(
            [
                dbc.NavbarBrand(APP_CONFIG["title"], href="#", className="ms-2", style=text_style),
                dbc.NavbarToggler(id="navbar-toggler", className="burger-button", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(
                        [*links, close_button],
                        className="ms-auto mobile-nav-links",
                        navbar=True,
                    ),
                    id="navbar-collapse",
                    is_open=False,
                    navbar=True,
                ),
            ], fluid=True,
        ),
        color="dark",
        dark=True,
        expand="lg",
        sticky="top",
        className="mb-0",
    )
