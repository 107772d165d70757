from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.datetime_utils import utc_now_iso
from ..common.validators import require_non_empty
from ..core.constants import TEMPLATES_SUBDIR
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.asset_store import AssetStore, Upload
from .model import CardTemplate
from .repository import CardTemplateRepository

logger = logging.getLogger(__name__)


class CardTemplateService:
    """Use case: manage birthday card templates."""

    def __init__(self, templates: CardTemplateRepository, assets: AssetStore):
        self._templates = templates
        self._assets = assets

    def list_templates(self) -> Sequence[CardTemplate]:
        return self._templates.list_all()

    def add_template(self, *, name: Optional[str], upload: Optional[Upload]) -> CardTemplate:
        if not name or not name.strip() or upload is None or not upload.data:
            raise ValidationError("Template name and file are required")

        url = self._assets.store(upload.data, upload.file_name, TEMPLATES_SUBDIR)

        templates = list(self._templates.list_all())
        template = CardTemplate(
            id=str(uuid.uuid4()),
            name=name.strip(),
            url=url,
            uploaded_at=utc_now_iso(),
        )
        templates.append(template)
        self._templates.save_all(templates)
        logger.info("Uploaded template %s -> %s", template.name, template.url)
        return template

    def remove_template(self, template_id: Optional[str]) -> None:
        template_id = require_non_empty(template_id, "Template ID")

        templates = self._templates.list_all()
        remaining = [t for t in templates if t.id != template_id]
        if len(remaining) == len(templates):
            raise NotFoundError("Template not found")

        self._templates.save_all(remaining)
        logger.info("Removed template %s", template_id)
