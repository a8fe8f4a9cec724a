# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import unittest

from azure.cli.core.azclierror import ValidationError
from azext_linkedservice.schema import SCHEMA, LinkedServiceConfig, plan
from azext_linkedservice.tests.latest._fixtures import ACCOUNT_ID, OTHER_ACCOUNT_ID


def _raw(**overrides):
    raw = {
        'resource_group_name': 'rg1',
        'workspace_name': 'ws01',
        'linked_service_properties': {'resource_id': ACCOUNT_ID},
    }
    raw.update(overrides)
    return raw


class SchemaDeclarationTest(unittest.TestCase):

    def test_identity_fields_are_create_only(self):
        for name in ['resource_group_name', 'workspace_name', 'linked_service_name', 'linked_service_properties']:
            self.assertTrue(SCHEMA[name].force_new, name)
        self.assertFalse(SCHEMA['tags'].force_new)

    def test_name_is_computed(self):
        self.assertTrue(SCHEMA['name'].computed)
        self.assertFalse(SCHEMA['name'].required)


class FromDictTest(unittest.TestCase):

    def test_defaults(self):
        config = LinkedServiceConfig.from_dict(_raw())

        self.assertEqual(config.linked_service_name, 'automation')
        self.assertEqual(config.tags, {})
        self.assertEqual(config.linked_service_properties, {'resource_id': ACCOUNT_ID})

    def test_to_dict(self):
        config = LinkedServiceConfig.from_dict(_raw(tags={'env': 'test'}))

        self.assertEqual(config.to_dict(), {
            'resource_group_name': 'rg1',
            'workspace_name': 'ws01',
            'linked_service_name': 'automation',
            'linked_service_properties': {'resource_id': ACCOUNT_ID},
            'tags': {'env': 'test'},
        })

    def test_missing_required_fields(self):
        with self.assertRaises(ValidationError) as ctx:
            LinkedServiceConfig.from_dict({})

        message = str(ctx.exception)
        self.assertIn('`resource_group_name` is required', message)
        self.assertIn('`workspace_name` is required', message)
        self.assertIn('`linked_service_properties` is required', message)

    def test_disallowed_linked_service_name(self):
        for name in ['cluster', 'Automation']:
            with self.assertRaises(ValidationError):
                LinkedServiceConfig.from_dict(_raw(linked_service_name=name))

    def test_invalid_workspace_names(self):
        for name in ['ws', '-ws01', 'ws01-', 'ws_01', 'w' * 64]:
            with self.assertRaises(ValidationError):
                LinkedServiceConfig.from_dict(_raw(workspace_name=name))

    def test_invalid_resource_group_names(self):
        for name in ['rg1.', 'rg/1', 'r' * 91]:
            with self.assertRaises(ValidationError):
                LinkedServiceConfig.from_dict(_raw(resource_group_name=name))

    def test_malformed_resource_id(self):
        with self.assertRaises(ValidationError) as ctx:
            LinkedServiceConfig.from_dict(_raw(linked_service_properties={'resource_id': 'acct1'}))

        self.assertIn('linked_service_properties.resource_id', str(ctx.exception))

    def test_properties_require_resource_id(self):
        with self.assertRaises(ValidationError):
            LinkedServiceConfig.from_dict(_raw(linked_service_properties={}))

    def test_properties_reject_unknown_keys(self):
        with self.assertRaises(ValidationError):
            LinkedServiceConfig.from_dict(_raw(linked_service_properties={
                'resource_id': ACCOUNT_ID, 'write_access_resource_id': ACCOUNT_ID}))

    def test_computed_and_unknown_fields_rejected(self):
        with self.assertRaises(ValidationError):
            LinkedServiceConfig.from_dict(_raw(name='automation'))
        with self.assertRaises(ValidationError):
            LinkedServiceConfig.from_dict(_raw(location='westus'))

    def test_too_many_tags(self):
        tags = {'key{}'.format(i): 'value' for i in range(51)}
        with self.assertRaises(ValidationError):
            LinkedServiceConfig.from_dict(_raw(tags=tags))

    def test_tag_value_too_long(self):
        with self.assertRaises(ValidationError):
            LinkedServiceConfig.from_dict(_raw(tags={'env': 'v' * 257}))

    def test_null_tag_values_are_empty_strings(self):
        config = LinkedServiceConfig.from_dict(_raw(tags={'flag': None}))

        self.assertEqual(config.tags, {'flag': ''})
        self.assertEqual(config.to_dict()['tags'], {'flag': ''})


class PlanTest(unittest.TestCase):

    def _prior(self, **overrides):
        prior = LinkedServiceConfig.from_dict(_raw()).to_dict()
        prior['name'] = 'automation'
        prior.update(overrides)
        return prior

    def test_no_changes(self):
        diff = plan(self._prior(), LinkedServiceConfig.from_dict(_raw()))

        self.assertFalse(diff.has_changes)
        self.assertFalse(diff.requires_replacement)

    def test_case_only_differences_are_suppressed(self):
        diff = plan(self._prior(resource_group_name='RG1', workspace_name='WS01'),
                    LinkedServiceConfig.from_dict(_raw()))

        self.assertFalse(diff.has_changes)

    def test_tags_update_in_place(self):
        diff = plan(self._prior(), LinkedServiceConfig.from_dict(_raw(tags={'env': 'prod'})))

        self.assertEqual(list(diff.changes), ['tags'])
        self.assertFalse(diff.requires_replacement)

    def test_null_tag_value_matches_remote_empty_string(self):
        diff = plan(self._prior(tags={'flag': ''}), LinkedServiceConfig.from_dict(_raw(tags={'flag': None})))

        self.assertFalse(diff.has_changes)

    def test_resource_id_change_requires_replacement(self):
        desired = LinkedServiceConfig.from_dict(_raw(linked_service_properties={'resource_id': OTHER_ACCOUNT_ID}))

        diff = plan(self._prior(), desired)

        self.assertEqual(list(diff.changes), ['linked_service_properties'])
        self.assertTrue(diff.requires_replacement)

    def test_workspace_change_requires_replacement(self):
        diff = plan(self._prior(), LinkedServiceConfig.from_dict(_raw(workspace_name='ws02')))

        self.assertTrue(diff.requires_replacement)

    def test_plan_without_prior_never_replaces(self):
        diff = plan(None, LinkedServiceConfig.from_dict(_raw()))

        self.assertTrue(diff.has_changes)
        self.assertFalse(diff.requires_replacement)


if __name__ == '__main__':
    unittest.main()
