"""Typography, spacing and colour constants for the CV layout.

All sizes are in PDF points. Spacing values ending in ``_LINES`` are
multipliers of the active line height, as consumed by ``Canvas.move_down``.
"""

from __future__ import annotations

FONT_FAMILY = "helvetica"

# Ratio of line height to font size for the core Helvetica face
# ((ascender + |descender| + line gap) / units per em).
LINE_HEIGHT_FACTOR = 1.156

# --- Font sizes ---
FONT_SIZE_NAME = 24
FONT_SIZE_SUBTITLE = 13
FONT_SIZE_CONTACT = 10
FONT_SIZE_BODY = 10
FONT_SIZE_ITEM_TITLE = 12
FONT_SIZE_SECTION_TITLE = 14

# --- Spacing ---
SPACING_HEADER_LINES = 0.5
SPACING_BEFORE_TITLE_LINES = 1.0
SPACING_AFTER_TITLE_LINES = 0.5
SPACING_ITEM_LINES = 0.8
SPACING_SECTION_GAP_LINES = 1.5
SPACING_AFTER_LAST_ITEM_LINES = SPACING_SECTION_GAP_LINES - SPACING_ITEM_LINES
SPACING_BULLETS_LINES = 0.3
SPACING_SKILL_GROUP_LINES = 0.3

# Estimated height of a dated heading plus the first body line.
SUBHEADING_BREAK_CHECK_HEIGHT = FONT_SIZE_ITEM_TITLE * 1.3 + FONT_SIZE_BODY * 1.3
SECTION_TITLE_LINE_ESTIMATE = FONT_SIZE_SECTION_TITLE * 1.2
PAGE_BREAK_BUFFER = 2.0

# Gap between a heading's title run and its right-aligned date.
DATE_GUTTER = 10.0

# Narrowest column a styled-run segment is ever given.
MIN_SEGMENT_WIDTH = 30.0

# --- Contact line ---
CONTACT_SEPARATOR = "  |  "
CONTACT_WRAP_THRESHOLD = 1.3
PORTFOLIO_LABEL = "Portfolio"

# --- Bulleted lists ---
LIST_INDENT = 15.0
LIST_TEXT_INDENT = 10.0
BULLET_SIZE = 3.0
PARAGRAPH_GAP = 2.0

# --- Rule under the header ---
RULE_WIDTH = 0.5

# --- Fallback labels ---
DEFAULT_NAME = "Name Missing"
DEFAULT_SUMMARY_TITLE = "Professional Summary"
DEFAULT_JOB_TITLE = "Job Title"
DEFAULT_COMPANY = "Company Name"
DEFAULT_QUALIFICATION = "Qualification"
DEFAULT_INSTITUTION = "Institution Name"
DEFAULT_PROJECT_NAME = "Project Name"
DEFAULT_SKILL_CATEGORY = "Technical Skills"

# --- Section titles ---
TITLE_EXPERIENCE = "Professional Experience"
TITLE_EDUCATION = "Education"
TITLE_SKILLS = "Skills"
TITLE_PROJECTS = "Projects"

# --- Colours (RGB) ---
COLOR_BLACK = (0, 0, 0)
COLOR_LINK = (0, 0, 255)
COLOR_SUBTITLE = (0x33, 0x33, 0x33)
COLOR_RULE = (0xCC, 0xCC, 0xCC)
