"""Atlassian Connect capability descriptor.

The host platform fetches this document to learn where the service lives,
which lifecycle callbacks to invoke, and which issue-view panel and dialog to
render. Everything except the base address is static.
"""

APP_KEY = "jira-gemini-connect-render"
APP_NAME = "Jira Gemini Connect"
APP_DESCRIPTION = "Refine Jira issue descriptions using Gemini AI"

DESCRIPTOR_PATH = "/atlassian-connect.json"
INSTALLED_PATH = "/installed"
UNINSTALLED_PATH = "/uninstalled"

PANEL_KEY = "aava-refiner-panel"
DIALOG_KEY = "aava-refiner-dialog"


def build_descriptor(base_url: str) -> dict:
    """Return the descriptor advertising `base_url` as the service address."""
    return {
        "apiVersion": 1,
        "key": APP_KEY,
        "name": APP_NAME,
        "description": APP_DESCRIPTION,
        "vendor": {
            "name": APP_NAME,
            "url": base_url,
        },
        "baseUrl": base_url,
        "links": {
            "self": f"{base_url}{DESCRIPTOR_PATH}",
        },
        "authentication": {"type": "jwt"},
        "apiMigrations": {"context-qsh": True},
        "lifecycle": {
            "installed": INSTALLED_PATH,
            "uninstalled": UNINSTALLED_PATH,
        },
        "scopes": ["READ", "WRITE"],
        "modules": {
            "jiraIssueContents": [
                {
                    "key": PANEL_KEY,
                    "name": {"value": "AAVA Refiner"},
                    "location": "atl.jira.view.issue.right.context",
                    "target": {
                        "type": "web_panel",
                        "url": "/public/panel.html?issueKey={issue.key}",
                    },
                    "icon": {"width": 16, "height": 16, "url": "/icon.png"},
                    "tooltip": {"value": "Refine issue description using Gemini AI"},
                }
            ],
            "dialogs": [
                {
                    "key": DIALOG_KEY,
                    "url": "/public/dialog.html?issueKey={issue.key}",
                    "options": {
                        "size": "large",
                        "header": {"value": "Enhanced Description"},
                    },
                }
            ],
        },
    }
