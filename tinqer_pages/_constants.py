"""Common literal values used across tinqer_pages.

These constants keep placeholder tokens and bundled asset names centralized so
the template, the compositor, and the tests import the same values without
drifting. Intended for internal use within the tinqer_pages package.

Examples
--------
>>> from tinqer_pages import _constants
>>> _constants.CONTENT_PLACEHOLDER
'{{CONTENT}}'
>>> len(_constants.PLACEHOLDERS)
6
"""

TITLE_PLACEHOLDER = "{{TITLE}}"
NAV_PLACEHOLDER = "{{NAV}}"
BREADCRUMB_PLACEHOLDER = "{{BREADCRUMB}}"
TOC_PLACEHOLDER = "{{TOC}}"
CONTENT_PLACEHOLDER = "{{CONTENT}}"
PAGE_NAV_PLACEHOLDER = "{{PAGE_NAV}}"

PLACEHOLDERS = (
    TITLE_PLACEHOLDER,
    NAV_PLACEHOLDER,
    BREADCRUMB_PLACEHOLDER,
    TOC_PLACEHOLDER,
    CONTENT_PLACEHOLDER,
    PAGE_NAV_PLACEHOLDER,
)

TEMPLATE_FILENAME = "template.html"
STYLESHEET_FILENAME = "styles.css"
LOGO_FILENAME = "logo.svg"
