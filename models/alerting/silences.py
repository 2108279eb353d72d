"""
Module defines Pydantic models for Alertmanager silences: the v2 API shapes for listing and creating silences, and the compact summary handed back to tool callers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum

# Description constants
DESC_LABEL_NAME_MATCH = "Label name to match"
DESC_VALUE_MATCH_AGAINST = "Value to match against"
DESC_VALUE_IS_REGEX = "Whether the value is a regular expression"
DESC_MATCH_EQUAL_VALUES = "Whether to match equal values"
DESC_UNIQUE_IDENTIFIER_SILENCE = "Unique identifier for the silence"
DESC_MATCHERS_DEFINE_SILENCE = "Matchers that define which alerts to silence"
DESC_TIME_SILENCE_STARTS = "Time when the silence starts"
DESC_TIME_SILENCE_ENDS = "Time when the silence ends"
DESC_USER_CREATED_SILENCE = "User who created the silence"
DESC_COMMENT_EXPLAINING_SILENCE = "Comment explaining the silence"
DESC_CURRENT_STATUS_SILENCE = "Current status of the silence"
DESC_CURRENT_STATE_SILENCE = "Current state of the silence"


class SilenceState(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    EXPIRED = "expired"


class SilenceStatus(BaseModel):
    state: SilenceState = Field(..., description=DESC_CURRENT_STATE_SILENCE)


class Matcher(BaseModel):
    name: str = Field(..., description=DESC_LABEL_NAME_MATCH)
    value: str = Field(..., description=DESC_VALUE_MATCH_AGAINST)
    is_regex: bool = Field(False, alias="isRegex", description=DESC_VALUE_IS_REGEX)
    is_equal: Optional[bool] = Field(None, alias="isEqual", description=DESC_MATCH_EQUAL_VALUES)

    model_config = ConfigDict(populate_by_name=True)


class Silence(BaseModel):
    id: str = Field(..., description=DESC_UNIQUE_IDENTIFIER_SILENCE)
    matchers: List[Matcher] = Field(..., description=DESC_MATCHERS_DEFINE_SILENCE)
    starts_at: str = Field(..., alias="startsAt", description=DESC_TIME_SILENCE_STARTS)
    ends_at: str = Field(..., alias="endsAt", description=DESC_TIME_SILENCE_ENDS)
    created_by: str = Field(..., alias="createdBy", description=DESC_USER_CREATED_SILENCE)
    comment: str = Field(..., description=DESC_COMMENT_EXPLAINING_SILENCE)
    status: SilenceStatus = Field(..., description=DESC_CURRENT_STATUS_SILENCE)

    model_config = ConfigDict(populate_by_name=True)


class SilenceCreate(BaseModel):
    matchers: List[Matcher] = Field(..., min_length=1, description=DESC_MATCHERS_DEFINE_SILENCE)
    starts_at: str = Field(..., alias="startsAt", description=DESC_TIME_SILENCE_STARTS)
    ends_at: str = Field(..., alias="endsAt", description=DESC_TIME_SILENCE_ENDS)
    created_by: str = Field(..., alias="createdBy", description=DESC_USER_CREATED_SILENCE)
    comment: str = Field(..., description=DESC_COMMENT_EXPLAINING_SILENCE)

    model_config = ConfigDict(populate_by_name=True)


class SilenceCreated(BaseModel):
    silence_id: str = Field(..., alias="silenceID", description=DESC_UNIQUE_IDENTIFIER_SILENCE)

    model_config = ConfigDict(populate_by_name=True)


class SilenceSummary(BaseModel):
    id: str = Field(..., description=DESC_UNIQUE_IDENTIFIER_SILENCE)
    status: SilenceState = Field(..., description=DESC_CURRENT_STATE_SILENCE)
    created_by: str = Field(..., alias="createdBy", description=DESC_USER_CREATED_SILENCE)
    comment: str = Field(..., description=DESC_COMMENT_EXPLAINING_SILENCE)
    starts_at: str = Field(..., alias="startsAt", description=DESC_TIME_SILENCE_STARTS)
    ends_at: str = Field(..., alias="endsAt", description=DESC_TIME_SILENCE_ENDS)
    matchers: List[Matcher] = Field(..., description=DESC_MATCHERS_DEFINE_SILENCE)

    model_config = ConfigDict(populate_by_name=True)
