"""
Argument models for the Alertmanager tools. The JSON schema of each model is the input schema advertised to the host, and handlers validate incoming arguments against the same model.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class GetAlertsRequest(BaseModel):
    filter: Optional[str] = Field(None, description="Filter query (e.g. alertname=~'.*CPU.*')")
    silenced: bool = Field(False, description="Include silenced alerts")
    inhibited: bool = Field(False, description="Include inhibited alerts")
    active: bool = Field(True, description="Include active alerts (default: true)")


class GetAlertDetailsRequest(BaseModel):
    fingerprint: str = Field(..., description="Fingerprint of the alert")


class MatcherRequest(BaseModel):
    name: str = Field(..., description="Label name to match (e.g. alertname)")
    value: str = Field(..., description="Label value to match (e.g. HighCPULoad)")
    isRegex: Optional[bool] = Field(None, description="Whether the value is a regular expression")


class CreateSilenceRequest(BaseModel):
    matchers: List[MatcherRequest] = Field(..., min_length=1, description="Matchers selecting the alerts to silence")
    startsAt: Optional[str] = Field(None, description="Silence start time (ISO 8601, defaults to now)")
    endsAt: str = Field(..., description="Silence end time (ISO 8601)")
    createdBy: str = Field(..., description="User creating the silence")
    comment: str = Field(..., description="Reason for the silence")


class GetSilencesRequest(BaseModel):
    filter: Optional[str] = Field(None, description="Filter query (e.g. createdBy=~'.*admin.*')")


class DeleteSilenceRequest(BaseModel):
    silenceId: str = Field(..., description="ID of the silence to delete")


class GetAlertGroupsRequest(BaseModel):
    active: bool = Field(True, description="Include active alerts (default: true)")
    silenced: bool = Field(False, description="Include silenced alerts")
    inhibited: bool = Field(False, description="Include inhibited alerts")
