"""
Module defines Pydantic models for Alertmanager alerts as returned by the v2 API, and the display projections handed back to tool callers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum

DESC_CURRENT_STATE_ALERT = "Current state of the alert"
DESC_LIST_SILENCES_SILENCE_ALERT = "List of silences that silence this alert"
DESC_LIST_ALERTS_INHIBIT_ALERT = "List of alerts that inhibit this alert"
DESC_KEY_VALUE_PAIRS_IDENTIFY_ALERT = "Key-value pairs that identify the alert"
DESC_ADDITIONAL_INFO_ALERT = "Additional information about the alert"
DESC_TIME_ALERT_STARTED_FIRING = "Time when the alert started firing"
DESC_TIME_ALERT_STOPPED_FIRING = "Time when the alert stopped firing"
DESC_URL_ALERT_GENERATOR = "URL of the alert generator"
DESC_CURRENT_STATUS_ALERT = "Current status of the alert"
DESC_UNIQUE_IDENTIFIER_ALERT = "Unique identifier for the alert"
DESC_ALERT_NAME = "Value of the alertname label"
DESC_ALERT_SEVERITY = "Value of the severity label"
DESC_ALERT_SUMMARY = "Summary annotation"
DESC_ALERT_DESCRIPTION = "Description annotation"
DESC_ALERT_SILENCED = "Whether at least one silence matches the alert"
DESC_ALERT_INHIBITED = "Whether at least one alert inhibits the alert"


class AlertState(str, Enum):
    UNPROCESSED = "unprocessed"
    ACTIVE = "active"
    SUPPRESSED = "suppressed"


class AlertStatus(BaseModel):
    state: AlertState = Field(..., description=DESC_CURRENT_STATE_ALERT)
    silenced_by: List[str] = Field(default_factory=list, alias="silencedBy", description=DESC_LIST_SILENCES_SILENCE_ALERT)
    inhibited_by: List[str] = Field(default_factory=list, alias="inhibitedBy", description=DESC_LIST_ALERTS_INHIBIT_ALERT)

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Alert(BaseModel):
    fingerprint: str = Field(..., description=DESC_UNIQUE_IDENTIFIER_ALERT)
    labels: Dict[str, str] = Field(..., description=DESC_KEY_VALUE_PAIRS_IDENTIFY_ALERT)
    annotations: Dict[str, str] = Field(default_factory=dict, description=DESC_ADDITIONAL_INFO_ALERT)
    starts_at: str = Field(..., alias="startsAt", description=DESC_TIME_ALERT_STARTED_FIRING)
    ends_at: Optional[str] = Field(None, alias="endsAt", description=DESC_TIME_ALERT_STOPPED_FIRING)
    generator_url: Optional[str] = Field(None, alias="generatorURL", description=DESC_URL_ALERT_GENERATOR)
    status: AlertStatus = Field(..., description=DESC_CURRENT_STATUS_ALERT)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("labels")
    @classmethod
    def _require_alertname(cls, labels: Dict[str, str]) -> Dict[str, str]:
        if "alertname" not in labels:
            raise ValueError("alert labels must include alertname")
        return labels

    @property
    def alertname(self) -> str:
        return self.labels["alertname"]


class FormattedAlertStatus(BaseModel):
    state: AlertState = Field(..., description=DESC_CURRENT_STATE_ALERT)
    silenced: bool = Field(..., description=DESC_ALERT_SILENCED)
    inhibited: bool = Field(..., description=DESC_ALERT_INHIBITED)


class FormattedAlert(BaseModel):
    fingerprint: str = Field(..., description=DESC_UNIQUE_IDENTIFIER_ALERT)
    alertname: str = Field(..., description=DESC_ALERT_NAME)
    severity: str = Field(..., description=DESC_ALERT_SEVERITY)
    summary: str = Field(..., description=DESC_ALERT_SUMMARY)
    description: str = Field(..., description=DESC_ALERT_DESCRIPTION)
    starts_at: str = Field(..., alias="startsAt", description=DESC_TIME_ALERT_STARTED_FIRING)
    status: FormattedAlertStatus = Field(..., description=DESC_CURRENT_STATUS_ALERT)
    labels: Dict[str, str] = Field(..., description=DESC_KEY_VALUE_PAIRS_IDENTIFY_ALERT)

    model_config = ConfigDict(populate_by_name=True)


class AlertDetails(BaseModel):
    fingerprint: str = Field(..., description=DESC_UNIQUE_IDENTIFIER_ALERT)
    alertname: str = Field(..., description=DESC_ALERT_NAME)
    labels: Dict[str, str] = Field(..., description=DESC_KEY_VALUE_PAIRS_IDENTIFY_ALERT)
    annotations: Dict[str, str] = Field(default_factory=dict, description=DESC_ADDITIONAL_INFO_ALERT)
    starts_at: str = Field(..., alias="startsAt", description=DESC_TIME_ALERT_STARTED_FIRING)
    ends_at: Optional[str] = Field(None, alias="endsAt", description=DESC_TIME_ALERT_STOPPED_FIRING)
    generator_url: Optional[str] = Field(None, alias="generatorURL", description=DESC_URL_ALERT_GENERATOR)
    status: AlertStatus = Field(..., description=DESC_CURRENT_STATUS_ALERT)

    model_config = ConfigDict(populate_by_name=True)
