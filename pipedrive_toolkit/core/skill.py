"""Skill-file scaffolding for organization workflow notes."""

import logging
from enum import Enum
from pathlib import Path

from .config_store import get_base_dir

logger = logging.getLogger(__name__)

SKILL_FILENAME = "SKILL.md"
LATEST_SUFFIX = ".latest"

SKILL_TEMPLATE = """# Pipedrive CRM Workflows

> Customize this file for your organization's Pipedrive workflows.
> Plugin updates never overwrite this file.

## Deal Naming Convention

When creating deals, use this format:
- **Title**: `[Company Name] - [Product/Plan] - [Value]`
- Example: `Acme Corp - Enterprise - $2,500/mo`

## Pipeline Stages

| Stage ID | Name | When to use |
|----------|------|-------------|
| 1 | Lead | Initial contact |
| 2 | Qualified | Confirmed interest |
| 3 | Proposal | Pricing sent |
| 4 | Negotiation | Active discussions |
| 5 | Closed Won | Deal signed |
| 6 | Closed Lost | Deal lost |

> **Note**: Replace stage IDs with your actual Pipedrive stage IDs.
> Find them via: `pipedrive_list_stages`

## Required Fields

When creating deals, always include:
- `title` - Following naming convention above
- `value` - Deal value in your currency
- `person_id` or `org_id` - Link to contact/company

## Activity Types

| Type | Use for | Subject format |
|------|---------|----------------|
| `call` | Phone calls | "Call: [topic]" |
| `meeting` | Demos, meetings | "Meeting: [purpose]" |
| `task` | Follow-ups, to-dos | "Task: [action]" |
| `email` | Email follow-ups | "Email: [subject]" |

## Common Workflows

### New Lead
1. Search if contact exists: `pipedrive_search_persons`
2. Create person if new: `pipedrive_create_person`
3. Create deal: `pipedrive_create_deal`
4. Schedule follow-up: `pipedrive_create_activity`

### After Demo
1. Update deal stage: `pipedrive_update_deal` with next stage_id
2. Add notes: `pipedrive_create_note`
3. Create follow-up task: `pipedrive_create_activity`

### Close Won
1. Update deal: `pipedrive_update_deal` with `status: "won"`
2. Add closing note: `pipedrive_create_note`

### Close Lost
1. Update deal: `pipedrive_update_deal` with `status: "lost"` and `lost_reason`

### Email Follow-up
1. Review the conversation: `pipedrive_list_deal_mail_messages`
2. Read a thread in full: `pipedrive_list_mail_thread_messages`
3. Link an unassigned thread to the deal: `pipedrive_update_mail_thread` with `deal_id`
"""


class ScaffoldResult(Enum):
    """Outcome of a scaffolding run."""
    CREATED = "created"
    LATEST_WRITTEN = "latest_written"
    UNCHANGED = "unchanged"
    FAILED = "failed"


def default_skill_dir() -> Path:
    """Return <base_dir>/skills/pipedrive."""
    return get_base_dir() / "skills" / "pipedrive"


def setup_skill_template(
    skill_dir: Path | None = None,
    template: str = SKILL_TEMPLATE,
) -> ScaffoldResult:
    """
    Ensure the skill file exists without touching user customizations.

    - No SKILL.md: write the template and report CREATED.
    - SKILL.md differs from the template: write SKILL.md.latest (overwriting
      any previous one) and report LATEST_WRITTEN. SKILL.md is left as is.
    - SKILL.md matches the template byte for byte: do nothing.

    Filesystem and encoding errors are logged as warnings and reported as FAILED.

    Args:
        skill_dir: Target directory (default: default_skill_dir())
        template: Bundled template text

    Returns:
        ScaffoldResult describing what happened
    """
    try:
        if skill_dir is None:
            skill_dir = default_skill_dir()
        skill_file = skill_dir / SKILL_FILENAME
        latest_file = skill_dir / (SKILL_FILENAME + LATEST_SUFFIX)

        template_bytes = template.encode("utf-8")
        skill_dir.mkdir(parents=True, exist_ok=True)

        if not skill_file.exists():
            skill_file.write_bytes(template_bytes)
            logger.info(f"Created skill template: {skill_file}")
            logger.info("Customize this file with your organization's workflows.")
            return ScaffoldResult.CREATED

        if skill_file.read_bytes() == template_bytes:
            return ScaffoldResult.UNCHANGED

        latest_file.write_bytes(template_bytes)
        logger.info(f"Skill file exists: {skill_file} (not modified)")
        logger.info(f"New template available: {latest_file}")
        logger.info(f"Compare with: diff {skill_file} {latest_file}")
        return ScaffoldResult.LATEST_WRITTEN

    except (OSError, UnicodeError) as e:
        logger.warning(f"Could not set up skill template: {e}")
        return ScaffoldResult.FAILED
