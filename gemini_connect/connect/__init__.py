"""Atlassian Connect integration package.

Architectural role:
    Holds the fixed-shape pieces the host platform needs to discover and
    install this service.

Module split:
    - `settings`: public address, port and static asset location.
    - `descriptor`: the `/atlassian-connect.json` capability document.
"""
