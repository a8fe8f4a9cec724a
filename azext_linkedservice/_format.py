from collections import OrderedDict
from jmespath import compile as compile_jmes, Options  # pylint: disable=import-error


_LINKED_SERVICE_TABLE = compile_jmes("""{
    name: name,
    workspaceName: workspace_name,
    resourceGroup: resource_group_name,
    resourceId: linked_service_properties.resource_id
}""")


def linked_service_show_table_format(result):
    """Format a linked service as summary results for display with "-o table"."""
    return [_linked_service_table_format(result)]


def linked_service_list_table_format(results):
    """Format a linked service list for display with "-o table"."""
    return [_linked_service_table_format(r) for r in results]


def _linked_service_table_format(result):
    # use ordered dicts so headers are predictable
    return _LINKED_SERVICE_TABLE.search(result, Options(dict_cls=OrderedDict))
