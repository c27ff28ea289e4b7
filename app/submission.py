"""
Submission handler: turns a validated record into what the user sees.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel

logger = logging.getLogger(__name__)

SUBMITTED_MESSAGE = "You submitted the following values:"


@dataclass
class SubmissionReceipt:
    payload: Dict[str, Any]
    text: str
    submitted_at: datetime = field(default_factory=datetime.now)
    message: str = SUBMITTED_MESSAGE


def serialize_record(record: BaseModel) -> str:
    """Pretty JSON, dates under camelCase keys (startDate, endDate)."""
    data = record.model_dump(mode="json", by_alias=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


def handle_submission(record: BaseModel) -> SubmissionReceipt:
    text = serialize_record(record)
    receipt = SubmissionReceipt(payload=json.loads(text), text=text)
    # field names only, the values are personal data
    logger.info(
        "%s - form submitted with fields: %s",
        receipt.submitted_at.strftime("%H:%M:%S"),
        ", ".join(receipt.payload),
    )
    return receipt
