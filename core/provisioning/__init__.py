"""Provisioning Module - rule matching and per-application payload merging."""
from core.provisioning.models import AppType, ProvisioningRule, EffectiveProvisioning
from core.provisioning.matcher import (
    evaluate, matches_condition, matching_rules, merge_provision_data, has_matching_rule
)
from core.provisioning.payloads import PAYLOAD_MODELS, parse_provision_data

__all__ = [
    'AppType', 'ProvisioningRule', 'EffectiveProvisioning',
    'evaluate', 'matches_condition', 'matching_rules', 'merge_provision_data',
    'has_matching_rule', 'PAYLOAD_MODELS', 'parse_provision_data',
]
