"""Renderers for the CV body sections.

Every function draws onto the canvas at its cursor and leaves the cursor
below what it drew. Repeating items are guarded with a fixed height estimate
so an item heading is never split across pages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from skripta_cv.constants.layout_constants import (
    BULLET_SIZE,
    COLOR_LINK,
    COLOR_SUBTITLE,
    DATE_GUTTER,
    DEFAULT_COMPANY,
    DEFAULT_INSTITUTION,
    DEFAULT_JOB_TITLE,
    DEFAULT_PROJECT_NAME,
    DEFAULT_QUALIFICATION,
    DEFAULT_SKILL_CATEGORY,
    DEFAULT_SUMMARY_TITLE,
    FONT_SIZE_BODY,
    FONT_SIZE_ITEM_TITLE,
    FONT_SIZE_SECTION_TITLE,
    LIST_INDENT,
    LIST_TEXT_INDENT,
    PARAGRAPH_GAP,
    SECTION_TITLE_LINE_ESTIMATE,
    SPACING_AFTER_LAST_ITEM_LINES,
    SPACING_AFTER_TITLE_LINES,
    SPACING_BEFORE_TITLE_LINES,
    SPACING_BULLETS_LINES,
    SPACING_ITEM_LINES,
    SPACING_SECTION_GAP_LINES,
    SPACING_SKILL_GROUP_LINES,
    SUBHEADING_BREAK_CHECK_HEIGHT,
    TITLE_EDUCATION,
    TITLE_EXPERIENCE,
    TITLE_PROJECTS,
    TITLE_SKILLS,
)
from skripta_cv.layout.contact import normalize_url
from skripta_cv.layout.dates import format_date_range
from skripta_cv.layout.metrics import TextStyle
from skripta_cv.layout.runs import RunPlacement, StyledRun, draw_run, draw_run_at_cursor

if TYPE_CHECKING:
    from skripta_cv.layout.canvas import Canvas
    from skripta_cv.models.profile import Education, Project, Skill, WorkExperience

__all__ = [
    "add_section_title",
    "draw_bullet_list",
    "draw_dated_heading",
    "group_skills",
    "render_education",
    "render_experience",
    "render_projects",
    "render_skills",
    "render_summary",
    "split_bullets",
]

BODY = TextStyle(size=FONT_SIZE_BODY)
BODY_BOLD = BODY.with_(bold=True)
ITEM_TITLE = TextStyle(size=FONT_SIZE_ITEM_TITLE, bold=True)
ITEM_PLAIN = TextStyle(size=FONT_SIZE_ITEM_TITLE)
ITEM_LINK = ITEM_PLAIN.with_(color=COLOR_LINK)
SECTION_TITLE = TextStyle(size=FONT_SIZE_SECTION_TITLE, bold=True)
TECH_LABEL = BODY_BOLD.with_(color=COLOR_SUBTITLE)
TECH_VALUE = BODY.with_(color=COLOR_SUBTITLE)

_HEADING_SEPARATOR = " | "


# ----------------------------------------------------------------------
# Shared building blocks
# ----------------------------------------------------------------------


def add_section_title(canvas: Canvas, title: str) -> None:
    """Draw a section title with more space above it than below.

    Starts a new page first when the spacing, the title and the space after
    it would not fit.
    """
    canvas.set_style(SECTION_TITLE)
    if canvas.y > canvas.margins.top + SECTION_TITLE_LINE_ESTIMATE:
        canvas.move_down(SPACING_BEFORE_TITLE_LINES)

    required = (
        SPACING_BEFORE_TITLE_LINES * SECTION_TITLE_LINE_ESTIMATE
        + SECTION_TITLE_LINE_ESTIMATE
        + SPACING_AFTER_TITLE_LINES * SECTION_TITLE_LINE_ESTIMATE
    )
    if canvas.y > canvas.bottom_limit - required:
        canvas.start_new_page()

    canvas.draw_text(title, SECTION_TITLE)
    canvas.move_down(SPACING_AFTER_TITLE_LINES)


def split_bullets(body: str | None) -> list[str]:
    """One bullet per non-empty, trimmed line of *body*."""
    if not body:
        return []
    return [line.strip() for line in body.splitlines() if line.strip()]


def draw_bullet_list(canvas: Canvas, items: list[str], style: TextStyle = BODY) -> None:
    """Draw *items* as an indented, justified bullet list at the cursor."""
    left = canvas.margins.left
    text_x = left + LIST_INDENT + LIST_TEXT_INDENT
    text_width = canvas.content_width - LIST_INDENT - LIST_TEXT_INDENT
    for item in items:
        canvas.ensure_space(style.line_height)
        canvas.set_style(style)
        bullet_y = canvas.y + (style.line_height - BULLET_SIZE) / 2
        canvas.draw_bullet(left + LIST_INDENT - BULLET_SIZE, bullet_y)
        canvas.draw_text(item, style, align="J", x=text_x, width=text_width)
        canvas.y = min(canvas.y + PARAGRAPH_GAP, canvas.bottom_limit)


def draw_dated_heading(canvas: Canvas, run: StyledRun, date_text: str) -> RunPlacement:
    """Draw *run* on the cursor row with *date_text* right-aligned beside it.

    The date goes first so the width left for the run is known; the cursor
    ends below the taller of the two.
    """
    left = canvas.margins.left
    available = canvas.content_width
    top = canvas.y

    date_height = 0.0
    run_width = available
    if date_text:
        date_width = canvas.width_of(date_text, BODY)
        canvas.draw_text_at(date_text, left, top, BODY, width=available, align="R")
        date_height = BODY.line_height
        run_width = available - date_width - DATE_GUTTER

    placement = draw_run(canvas, run, left, top, run_width)
    canvas.y = top + max(placement.height, date_height)
    return placement


def _heading_run(title: str, subtitle: str) -> StyledRun:
    return StyledRun.of(
        (title, ITEM_TITLE),
        (_HEADING_SEPARATOR, ITEM_PLAIN),
        (subtitle, ITEM_TITLE),
    )


def _finish_item(canvas: Canvas) -> None:
    canvas.set_style(BODY)
    canvas.move_down(SPACING_ITEM_LINES)


# ----------------------------------------------------------------------
# Sections
# ----------------------------------------------------------------------


def render_summary(canvas: Canvas, title: str | None, summary: str | None) -> None:
    """Summary section; always titled, body skipped when there is no text."""
    add_section_title(canvas, title or DEFAULT_SUMMARY_TITLE)
    if summary and summary.strip():
        canvas.draw_text(summary.strip(), BODY, align="J")
    canvas.set_style(BODY)
    canvas.move_down(SPACING_ITEM_LINES)
    canvas.move_down(SPACING_AFTER_LAST_ITEM_LINES)


def render_experience(canvas: Canvas, experience: list[WorkExperience], ongoing_label: str) -> None:
    if not experience:
        return
    add_section_title(canvas, TITLE_EXPERIENCE)
    for exp in experience:
        canvas.ensure_space(SUBHEADING_BREAK_CHECK_HEIGHT)
        run = _heading_run(exp.job_title or DEFAULT_JOB_TITLE, exp.company_name or DEFAULT_COMPANY)
        draw_dated_heading(canvas, run, format_date_range(exp.start_date, exp.end_date, ongoing_label))

        bullets = split_bullets(exp.responsibilities)
        if bullets:
            canvas.move_down(SPACING_BULLETS_LINES, BODY)
            draw_bullet_list(canvas, bullets)
        _finish_item(canvas)
    canvas.move_down(SPACING_AFTER_LAST_ITEM_LINES)


def render_education(canvas: Canvas, education: list[Education], ongoing_label: str) -> None:
    if not education:
        return
    add_section_title(canvas, TITLE_EDUCATION)
    for edu in education:
        canvas.ensure_space(SUBHEADING_BREAK_CHECK_HEIGHT)
        qualification = " in ".join(part for part in (edu.degree, edu.field_of_study) if part)
        run = _heading_run(
            qualification or DEFAULT_QUALIFICATION,
            edu.institution_name or DEFAULT_INSTITUTION,
        )
        draw_dated_heading(canvas, run, format_date_range(edu.start_date, edu.end_date, ongoing_label))
        _finish_item(canvas)
    canvas.move_down(SPACING_AFTER_LAST_ITEM_LINES)


def group_skills(skills: list[Skill]) -> dict[str, list[str]]:
    """Group skill names by category, keeping first-seen category order."""
    groups: dict[str, list[str]] = {}
    for skill in skills:
        groups.setdefault(skill.category or DEFAULT_SKILL_CATEGORY, []).append(skill.skill_name)
    return groups


def render_skills(canvas: Canvas, skills: list[Skill]) -> None:
    if not skills:
        return
    add_section_title(canvas, TITLE_SKILLS)
    for category, names in group_skills(skills).items():
        draw_run_at_cursor(canvas, StyledRun.of((f"{category}: ", BODY_BOLD), (", ".join(names), BODY)))
        canvas.move_down(SPACING_SKILL_GROUP_LINES, BODY)
    canvas.move_down(SPACING_SECTION_GAP_LINES - SPACING_SKILL_GROUP_LINES, BODY)


def render_projects(canvas: Canvas, projects: list[Project], ongoing_label: str) -> None:
    """Projects with a linked (or bold) name, dates, technologies and bullets."""
    if not projects:
        return
    add_section_title(canvas, TITLE_PROJECTS)
    for project in projects:
        canvas.ensure_space(SUBHEADING_BREAK_CHECK_HEIGHT)
        name = project.project_name or DEFAULT_PROJECT_NAME
        url = None
        if project.project_link:
            url = normalize_url(project.project_link)
            if url is None:
                canvas.report_defect(
                    "malformed_url",
                    f"Dropped link {project.project_link!r} for project {name!r}",
                )

        date_text = format_date_range(project.start_date, project.end_date, ongoing_label)
        placement = draw_dated_heading(canvas, StyledRun.of((name, ITEM_LINK if url else ITEM_TITLE)), date_text)
        if url:
            placed = placement.segments[0]
            canvas.add_link(placed.x, placed.y, max(placed.width, 1.0), max(placed.height, 1.0), url)

        if project.technologies:
            canvas.move_down(SPACING_BULLETS_LINES, BODY)
            draw_run_at_cursor(
                canvas,
                StyledRun.of(("Technologies: ", TECH_LABEL), (", ".join(project.technologies), TECH_VALUE)),
            )

        bullets = split_bullets(project.description)
        if bullets:
            canvas.move_down(SPACING_BULLETS_LINES, BODY)
            draw_bullet_list(canvas, bullets)
        _finish_item(canvas)
    canvas.move_down(SPACING_AFTER_LAST_ITEM_LINES)
