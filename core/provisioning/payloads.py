#!/usr/bin/env python3
"""
Typed provisioning payloads, one model per application type.

The matcher works on plain dicts; connectors receive one of these models.
Every AppType must have a model in PAYLOAD_MODELS, checked at import.
"""

import logging
from typing import Any, Dict, List, Literal, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.provisioning.models import AppType, as_mapping, parse_app_type

logger = logging.getLogger(__name__)


class ProvisionData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class GoogleProvisionData(ProvisionData):
    org_unit_path: Optional[str] = Field(None, alias='orgUnitPath')
    groups: List[str] = Field(default_factory=list)


class SlackProvisionData(ProvisionData):
    channels: List[str] = Field(default_factory=list)
    user_groups: List[str] = Field(default_factory=list, alias='userGroups')


class RepositoryPermission(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    repo_slug: str = Field(alias='repoSlug')
    permission: Literal['read', 'write', 'admin'] = 'read'


class BitbucketProvisionData(ProvisionData):
    groups: List[str] = Field(default_factory=list)
    repositories: List[RepositoryPermission] = Field(default_factory=list)


class JiraProjectRole(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    project_id: str = Field(alias='projectId')
    role_id: str = Field(alias='roleId')
    project_key: Optional[str] = Field(None, alias='projectKey')
    project_name: Optional[str] = Field(None, alias='projectName')
    board_id: Optional[str] = Field(None, alias='boardId')
    board_name: Optional[str] = Field(None, alias='boardName')
    role_name: Optional[str] = Field(None, alias='roleName')


class JiraProvisionData(ProvisionData):
    groups: List[str] = Field(default_factory=list)
    project_roles: List[JiraProjectRole] = Field(default_factory=list, alias='projectRoles')


class PassboltProvisionData(ProvisionData):
    role: Optional[Literal['user', 'admin']] = None
    is_admin: Optional[bool] = Field(None, alias='isAdmin')


class GenericProvisionData(ProvisionData):
    """Applications without a fixed payload shape keep every key."""
    model_config = ConfigDict(populate_by_name=True, extra='allow')


PAYLOAD_MODELS: Dict[AppType, Type[ProvisionData]] = {
    AppType.GOOGLE_WORKSPACE: GoogleProvisionData,
    AppType.SLACK: SlackProvisionData,
    AppType.BITBUCKET: BitbucketProvisionData,
    AppType.JIRA: JiraProvisionData,
    AppType.PASSBOLT: PassboltProvisionData,
    AppType.HUBSPOT: GenericProvisionData,
    AppType.STANDUPNINJA: GenericProvisionData,
    AppType.FIREFLIES: GenericProvisionData,
    AppType.WEBFLOW: GenericProvisionData,
}

_unmapped = [app_type.value for app_type in AppType if app_type not in PAYLOAD_MODELS]
if _unmapped:
    raise RuntimeError(f"No provisioning payload model for app types: {_unmapped}")


def payload_model_for(app_type: Any) -> Type[ProvisionData]:
    """Payload model for an app type; unknown types keep every key."""
    known = parse_app_type(app_type)
    if known is None:
        logger.warning(f"Unknown app type {app_type!r}, using generic provisioning payload")
        return GenericProvisionData
    return PAYLOAD_MODELS[known]


def parse_provision_data(app_type: Union[AppType, str], payload: Mapping[str, Any]) -> ProvisionData:
    """
    Validate a merged payload into the app's model.

    Keys whose value does not fit the model are dropped with a warning; this
    never raises on bad payload data or an unknown app type.
    """
    model = payload_model_for(app_type)
    data = as_mapping(payload, "provisionData")

    valid: Dict[str, Any] = {}
    for key, value in data.items():
        try:
            model.model_validate({key: value})
        except ValidationError as e:
            logger.warning(
                f"Dropping invalid {app_type} provisioning field {key!r}: "
                f"{e.error_count()} validation error(s)"
            )
            continue
        valid[key] = value

    try:
        return model.model_validate(valid)
    except ValidationError as e:
        logger.warning(f"Invalid {app_type} provisioning payload, using empty payload: {e}")
        return model()
