"""
Resume Document Structure

Defines the structured representation of résumé content shown by the viewer.

YAML layout:

    document:
      metadata:
        name: Jane Doe
        brand: Staff Engineer
        professional_profile: ...
        contact:
          Email: jane@example.com
      sections:
        - name: Experience
          type: work_history
          subsections:
            - company: ...
              title: ...
              dates: ...
              items: [...]
        - name: Projects
          type: projects
          include: projects.yaml      # loaded on first open

Every section type is normalised to a flat list of ResumeEntry objects so the
viewer only has to know about one shape.
"""

import re
import textwrap
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from omegaconf import OmegaConf

from resume_tui.contexts.viewer.exceptions import (
    InvalidResumeStructureError,
    ResumeLoadError,
)
from resume_tui.contexts.viewer.logger import log_document_loaded, log_include_loaded

ABOUT_SECTION_NAME = "About"


@dataclass
class ResumeEntry:
    """
    One selectable item within a section (a job, a degree, a skill group...).

    Attributes:
        title: Primary label (company, institution, project name)
        subtitle: Secondary label (role, degree, URL)
        dates: Free-form date range
        location: Free-form location
        items: Bullet points
    """

    title: str
    subtitle: str = ""
    dates: str = ""
    location: str = ""
    items: List[str] = field(default_factory=list)

    @property
    def meta_line(self) -> str:
        """Subtitle, dates and location joined for a one-line summary."""
        return " · ".join(part for part in (self.subtitle, self.dates, self.location) if part)

    def detail_lines(self, width: int) -> List[str]:
        """
        Word-wrap the entry for the detail pane.

        Args:
            width: Available columns

        Returns:
            Lines ready to draw, bullets hanging-indented
        """
        lines = []
        if self.meta_line:
            lines.extend(textwrap.wrap(self.meta_line, width) or [""])
            lines.append("")
        for item in self.items:
            lines.extend(
                textwrap.wrap(item, width, initial_indent="• ", subsequent_indent="  ") or ["•"]
            )
        return lines


@dataclass
class ResumeSection:
    """
    A named group of entries.

    Sections declared with `include` start unloaded; load_entries() reads the
    file on first use and caches the result.

    Attributes:
        name: Section name shown in the menu
        section_type: Type identifier (e.g., "work_history", "list")
        entries: Entries, or None while an include is still unloaded
        include_path: Absolute path of the include file, if any
    """

    name: str
    section_type: str
    entries: Optional[List[ResumeEntry]] = None
    include_path: Optional[Path] = None

    @property
    def is_loaded(self) -> bool:
        return self.entries is not None

    def load_entries(self) -> List[ResumeEntry]:
        """
        Return the entries, reading the include file if needed.

        Raises:
            ResumeLoadError: If the include file is missing or unreadable
            InvalidResumeStructureError: If it has no 'section' mapping
        """
        if self.entries is None:
            data = _read_yaml(self.include_path)
            if not isinstance(data.get("section"), dict):
                raise InvalidResumeStructureError(
                    f"Invalid include for section '{self.name}': missing 'section' key in {self.include_path}"
                )
            self.entries = normalize_entries(self.section_type, data["section"])
            log_include_loaded(self.name, self.include_path, len(self.entries))
        return self.entries


class ResumeDocument:
    """
    Structured representation of a complete résumé.

    Attributes:
        name: Person's name
        brand: Professional title / tagline
        profile: Professional profile paragraph(s)
        contact: Ordered label -> value pairs
        sections: Ordered sections, "About" first
        source_path: YAML file the document was read from
    """

    def __init__(self, yaml_path: Path, blacklist_patterns: Optional[List[str]] = None):
        """
        Load a résumé from a YAML file.

        Args:
            yaml_path: Path to résumé YAML
            blacklist_patterns: Regex patterns; sections whose name matches are skipped

        Raises:
            ResumeLoadError: If yaml_path does not exist or cannot be parsed
            InvalidResumeStructureError: If required fields are missing
        """
        if type(yaml_path) is str:
            yaml_path = Path(yaml_path)

        yaml_dict = _read_yaml(yaml_path)
        self._populate(yaml_dict, yaml_path.resolve().parent, blacklist_patterns or [])
        self.source_path = yaml_path
        log_document_loaded(self.name, yaml_path, len(self.sections))

    @classmethod
    def from_dict(
        cls,
        yaml_dict: Dict[str, Any],
        base_dir: Optional[Path] = None,
        blacklist_patterns: Optional[List[str]] = None,
    ) -> "ResumeDocument":
        """
        Build a document from already-parsed YAML data.

        Args:
            yaml_dict: Mapping with a top-level 'document' key
            base_dir: Directory that include paths are relative to (default: cwd)
            blacklist_patterns: Regex patterns; sections whose name matches are skipped
        """
        doc = cls.__new__(cls)
        doc._populate(yaml_dict, base_dir or Path.cwd(), blacklist_patterns or [])
        doc.source_path = None
        return doc

    def _populate(self, yaml_dict: Dict[str, Any], base_dir: Path, blacklist_patterns: List[str]) -> None:
        if "document" not in yaml_dict:
            raise InvalidResumeStructureError("Invalid YAML structure: missing 'document' key")

        doc = yaml_dict["document"]
        if not isinstance(doc, dict):
            raise InvalidResumeStructureError("Invalid YAML structure: 'document' must be a mapping")
        metadata = doc.get("metadata")
        if not isinstance(metadata, dict) or not metadata.get("name"):
            raise InvalidResumeStructureError("Invalid YAML structure: missing 'document.metadata.name'")
        if not isinstance(doc.get("sections"), list):
            raise InvalidResumeStructureError("Invalid YAML structure: 'document.sections' must be a list")

        self.name = str(metadata["name"])
        self.brand = str(metadata.get("brand", "") or "")
        self.profile = str(metadata.get("professional_profile", "") or "").strip()
        contact = metadata.get("contact") or {}
        if not isinstance(contact, dict):
            raise InvalidResumeStructureError(
                f"Invalid YAML structure: 'document.metadata.contact' must be a mapping, got {type(contact).__name__}"
            )
        self.contact = {str(k): str(v) for k, v in contact.items()}

        self.sections = [self._about_section()]
        for section_data in doc["sections"]:
            if isinstance(section_data, dict) and section_data.get("hidden", False):
                continue
            section = _build_section(section_data, base_dir)
            if any(re.search(pattern, section.name, re.IGNORECASE) for pattern in blacklist_patterns):
                continue
            self.sections.append(section)

    def _about_section(self) -> ResumeSection:
        entries = []
        if self.profile:
            paragraphs = [p.strip() for p in re.split(r"\n\s*\n", self.profile) if p.strip()]
            entries.append(ResumeEntry(title="Profile", subtitle=self.brand, items=paragraphs))
        if self.contact:
            entries.append(
                ResumeEntry(title="Contact", items=[f"{label}: {value}" for label, value in self.contact.items()])
            )
        return ResumeSection(name=ABOUT_SECTION_NAME, section_type="about", entries=entries)

    @property
    def contact_line(self) -> str:
        return "  ".join(self.contact.values())

    def __repr__(self) -> str:
        return f"ResumeDocument(name={self.name!r}, sections={[s.name for s in self.sections]})"


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ResumeLoadError("Resume file not found", path=path)
    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    except Exception as e:
        raise ResumeLoadError("Failed to parse resume YAML", path=path, original_error=e) from e
    if not isinstance(data, dict):
        raise InvalidResumeStructureError(f"Invalid YAML structure: expected a mapping in {path}")
    return data


def _build_section(section_data: Dict[str, Any], base_dir: Path) -> ResumeSection:
    if not isinstance(section_data, dict) or not section_data.get("name"):
        raise InvalidResumeStructureError(f"Invalid section: every section needs a 'name' ({section_data!r})")

    name = str(section_data["name"])
    section_type = str(section_data.get("type", "generic"))

    if "include" in section_data:
        include_path = (base_dir / str(section_data["include"])).resolve()
        return ResumeSection(name=name, section_type=section_type, include_path=include_path)

    return ResumeSection(
        name=name,
        section_type=section_type,
        entries=normalize_entries(section_type, section_data),
    )


# ---------------------------------------------------------------------------
# Entry normalisation by section type
# ---------------------------------------------------------------------------


def _items(data: Dict[str, Any]) -> List[str]:
    items = data.get("items") or []
    if not isinstance(items, list):
        raise InvalidResumeStructureError(f"'items' must be a list, got {type(items).__name__}")
    return [str(item) for item in items]


def _entry_from_work(data: Dict[str, Any]) -> ResumeEntry:
    items = _items(data)
    projects = data.get("projects") or []
    if not isinstance(projects, list):
        raise InvalidResumeStructureError(f"'projects' must be a list, got {type(projects).__name__}")
    for project in projects:
        if not isinstance(project, dict):
            raise InvalidResumeStructureError(f"Invalid project: expected a mapping, got {project!r}")
        project_name = project.get("name", "")
        for item in _items(project):
            items.append(f"{project_name}: {item}" if project_name else item)
    return ResumeEntry(
        title=str(data.get("company", "")),
        subtitle=str(data.get("title", "")),
        dates=str(data.get("dates", "")),
        location=str(data.get("location", "")),
        items=items,
    )


def _entry_from_education(data: Dict[str, Any]) -> ResumeEntry:
    return ResumeEntry(
        title=str(data.get("institution", "")),
        subtitle=str(data.get("degree", "")),
        dates=str(data.get("dates", "")),
        location=str(data.get("location", "")),
        items=_items(data),
    )


def _entry_from_project(data: Dict[str, Any]) -> ResumeEntry:
    return ResumeEntry(
        title=str(data.get("name", "")),
        subtitle=str(data.get("url", "")),
        dates=str(data.get("dates", "")),
        items=_items(data),
    )


def _entry_from_category(data: Dict[str, Any]) -> ResumeEntry:
    return ResumeEntry(title=str(data.get("name", "")), items=_items(data))


def _entry_generic(data: Dict[str, Any]) -> ResumeEntry:
    return ResumeEntry(
        title=str(data.get("title", data.get("name", ""))),
        subtitle=str(data.get("subtitle", "")),
        dates=str(data.get("dates", "")),
        location=str(data.get("location", "")),
        items=_items(data),
    )


SUBSECTION_NORMALIZERS: Dict[str, Callable[[Dict[str, Any]], ResumeEntry]] = {
    "work_history": _entry_from_work,
    "education": _entry_from_education,
    "projects": _entry_from_project,
    "skill_categories": _entry_from_category,
}

LIST_SECTION_TYPES = {"list", "skill_list_caps", "skill_list_pipes"}


def normalize_entries(section_type: str, section_data: Dict[str, Any]) -> List[ResumeEntry]:
    """
    Convert a section's YAML content into entries.

    List sections turn each item into its own entry; every other type reads
    'subsections' through the type's normaliser (generic for unknown types).

    Args:
        section_type: Type identifier
        section_data: Section mapping (with 'subsections' or 'items')

    Returns:
        List of ResumeEntry

    Raises:
        InvalidResumeStructureError: If subsections/items have the wrong shape
    """
    if section_type in LIST_SECTION_TYPES:
        return [ResumeEntry(title=item) for item in _items(section_data)]

    subsections = section_data.get("subsections") or []
    if not isinstance(subsections, list):
        raise InvalidResumeStructureError(
            f"'subsections' must be a list in section '{section_data.get('name', '?')}'"
        )

    normalizer = SUBSECTION_NORMALIZERS.get(section_type, _entry_generic)
    entries = []
    for subsection in subsections:
        if not isinstance(subsection, dict):
            raise InvalidResumeStructureError(f"Invalid subsection: expected a mapping, got {subsection!r}")
        entries.append(normalizer(subsection))
    return entries
