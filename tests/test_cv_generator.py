"""Tests for the CV generation service."""

from __future__ import annotations

import io
from collections import defaultdict
from unittest.mock import patch

import pytest
from pypdf import PdfReader

from skripta_cv.config import LayoutSettings
from skripta_cv.constants.layout_constants import (
    DEFAULT_NAME,
    FONT_SIZE_ITEM_TITLE,
    TITLE_EDUCATION,
    TITLE_EXPERIENCE,
    TITLE_PROJECTS,
    TITLE_SKILLS,
)
from skripta_cv.exceptions import CvGenerationError, LayoutError, SerializationError
from skripta_cv.models import ProfileData, Project, Skill, UserProfile, WorkExperience
from skripta_cv.services import CvDocumentBuilder, generate_cv_pdf, render_cv
from skripta_cv.services.cv_generator import build_document_info


def _rows(rendered) -> dict[tuple[int, float], list]:
    """Fragments grouped by (page, y), each row sorted left to right."""
    rows: dict[tuple[int, float], list] = defaultdict(list)
    for fragment in rendered.fragments:
        rows[(fragment.page, round(fragment.y, 3))].append(fragment)
    return {key: sorted(row, key=lambda f: f.x) for key, row in rows.items()}


def _long_profile(entries: int = 15) -> ProfileData:
    return ProfileData(
        user=UserProfile(full_name="Long History"),
        experience=[
            WorkExperience(
                job_title=f"Engineer {n}",
                company_name=f"Company {n}",
                start_date=f"{2000 + n}-03-01",
                end_date=f"{2000 + n}-11-30",
                responsibilities="\n".join(f"Delivered outcome {k} for team {n}." for k in range(5)),
            )
            for n in range(entries)
        ],
    )


class TestRenderCv:
    def test_returns_pdf(self, full_profile):
        rendered = render_cv(full_profile)
        assert rendered.content.startswith(b"%PDF")
        assert rendered.page_count >= 1

    def test_generate_cv_pdf_returns_bytes(self, full_profile):
        assert generate_cv_pdf(full_profile).startswith(b"%PDF")

    def test_open_experience_heading(self):
        profile = ProfileData(
            user=UserProfile(full_name="Ada"),
            experience=[
                WorkExperience(
                    job_title="Lead Developer",
                    company_name="Alpha Tech",
                    start_date="2020-01-01",
                    end_date=None,
                )
            ],
        )
        rendered = render_cv(profile)
        heading_rows = [
            row
            for row in _rows(rendered).values()
            if any(f.text == "Jan 2020 - Present" for f in row)
        ]
        assert len(heading_rows) == 1
        title = "".join(f.text for f in heading_rows[0] if f.style.size == FONT_SIZE_ITEM_TITLE)
        assert title == "Lead Developer | Alpha Tech"

    def test_empty_collections_omit_sections(self, minimal_profile):
        texts = {f.text for f in render_cv(minimal_profile).fragments}
        assert "Minimal Person" in texts
        assert "Professional Summary" in texts
        for title in (TITLE_EXPERIENCE, TITLE_EDUCATION, TITLE_SKILLS, TITLE_PROJECTS):
            assert title not in texts

    def test_missing_name_placeholder(self):
        rendered = render_cv(ProfileData(user=UserProfile()))
        assert rendered.fragments[0].text == DEFAULT_NAME

    def test_section_order(self, full_profile):
        texts = [f.text for f in render_cv(full_profile).fragments]
        order = [
            texts.index(full_profile.target_job_title),
            texts.index(TITLE_EXPERIENCE),
            texts.index(TITLE_EDUCATION),
            texts.index(TITLE_SKILLS),
            texts.index(TITLE_PROJECTS),
        ]
        assert order == sorted(order)

    def test_contact_and_project_links(self, full_profile):
        urls = [h.url for h in render_cv(full_profile).hotspots]
        assert "mailto:john.full@example.com" in urls
        assert "https://github.com/johnny-full" in urls
        assert "https://github.com/johnny-full/phoenix" in urls

    def test_ongoing_label_from_settings(self):
        profile = ProfileData(
            user=UserProfile(full_name="Ada"),
            experience=[WorkExperience(job_title="Dev", company_name="Co", start_date="2021-02-01")],
        )
        settings = LayoutSettings.model_construct(ongoing_label="Ongoing")
        texts = {f.text for f in render_cv(profile, settings).fragments}
        assert "Feb 2021 - Ongoing" in texts

    def test_rendering_is_repeatable(self, full_profile):
        first = render_cv(full_profile)
        second = render_cv(full_profile)
        assert first.fragments == second.fragments
        assert first.hotspots == second.hotspots


class TestPagination:
    def test_long_history_spans_pages(self):
        assert render_cv(_long_profile()).page_count > 1

    def test_heading_and_date_share_page_and_row(self):
        profile = _long_profile()
        rendered = render_cv(profile)
        for exp in profile.experience:
            title = next(f for f in rendered.fragments if f.text == exp.job_title)
            date_text = f"Mar {exp.start_date[:4]} - Nov {exp.end_date[:4]}"
            date = next(f for f in rendered.fragments if f.text == date_text)
            assert (date.page, date.y) == (title.page, title.y)

    def test_nothing_drawn_below_bottom_margin(self):
        profile = _long_profile(25).model_copy(
            update={
                "skills": [
                    Skill(skill_name=f"Tool {group}.{n}", category=f"Group {group}")
                    for group in range(30)
                    for n in range(30)
                ],
                "projects": [
                    Project(
                        project_name=f"Project {n}",
                        technologies=[f"Library{n}-{k}" for k in range(40)],
                        description="Shipped it.\nMaintained it.",
                    )
                    for n in range(10)
                ],
            }
        )
        rendered = render_cv(profile)
        bottom = 841.89 - LayoutSettings.model_construct().margin
        for fragment in rendered.fragments:
            assert fragment.y + fragment.height <= bottom + 0.01, fragment.text[:40]

    def test_pages_are_in_order(self):
        pages = [f.page for f in render_cv(_long_profile()).fragments]
        assert pages == sorted(pages)


class TestErrors:
    def test_layout_failure_raises_layout_error(self, full_profile):
        with (
            patch(
                "skripta_cv.services.cv_generator.render_experience",
                side_effect=RuntimeError("font table corrupt"),
            ),
            pytest.raises(LayoutError, match="font table corrupt"),
        ):
            render_cv(full_profile)

    def test_serialization_failure_propagates(self, full_profile):
        with (
            patch("fpdf.FPDF.output", side_effect=RuntimeError("no space")),
            pytest.raises(SerializationError),
        ):
            render_cv(full_profile)

    def test_errors_share_base_class(self):
        assert issubclass(LayoutError, CvGenerationError)
        assert issubclass(SerializationError, CvGenerationError)


class TestDocumentInfo:
    def test_with_target(self, full_profile):
        info = build_document_info(full_profile)
        assert info["title"] == "Johnathan 'Johnny' Full - Lead Full Stack Developer"
        assert info["author"] == "Johnathan 'Johnny' Full"
        assert info["subject"] == "CV for Lead Full Stack Developer"
        assert "Node.js" in info["keywords"]

    def test_without_target_or_name(self):
        info = build_document_info(ProfileData(user=UserProfile()))
        assert info["title"] == f"{DEFAULT_NAME} - CV"
        assert info["author"] == "Skripta User"
        assert info["subject"] == "Curriculum Vitae"

    def test_metadata_written_to_pdf(self, full_profile):
        reader = PdfReader(io.BytesIO(generate_cv_pdf(full_profile)))
        assert reader.metadata.title == "Johnathan 'Johnny' Full - Lead Full Stack Developer"
        assert reader.metadata.creator == "Skripta"


class TestPdfOutput:
    def test_page_count_matches(self):
        rendered = render_cv(_long_profile())
        reader = PdfReader(io.BytesIO(rendered.content))
        assert len(reader.pages) == rendered.page_count

    def test_text_is_extractable(self, full_profile):
        reader = PdfReader(io.BytesIO(generate_cv_pdf(full_profile)))
        text = reader.pages[0].extract_text()
        assert "Lead Developer" in text
        assert "Professional Experience" in text

    def test_link_annotations_present(self, full_profile):
        reader = PdfReader(io.BytesIO(generate_cv_pdf(full_profile)))
        uris = []
        for page in reader.pages:
            annots = page.get("/Annots")
            if annots is None:
                continue
            for annot in annots.get_object():
                action = annot.get_object().get("/A")
                if action is not None:
                    uris.append(action.get_object().get("/URI"))
        assert "mailto:john.full@example.com" in uris


class TestBuilder:
    def test_builder_uses_own_canvas(self, full_profile):
        first = CvDocumentBuilder(full_profile)
        second = CvDocumentBuilder(full_profile)
        assert first.canvas is not second.canvas
        assert first.build().page_count == second.build().page_count
