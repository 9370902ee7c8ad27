"""Tests for core/registry.py — the tool catalog and argument decoding."""
import pytest

from core.exceptions import InvalidArgumentsError, UnknownToolError
from core.models import ClientDetailsQuery, ClientListQuery, ErrorKind, TicketQuery
from core.registry import decode_arguments, get_tool, list_tools


EXPECTED_SCHEMAS = {
    "get_client_details": {"clientid": ("string", True)},
    "get_clients": {
        "limitstart": ("number", False),
        "limitnum": ("number", False),
        "search": ("string", False),
    },
    "get_invoices": {
        "limitstart": ("number", False),
        "limitnum": ("number", False),
        "userid": ("string", False),
        "status": ("string", False),
    },
    "get_orders": {
        "limitstart": ("number", False),
        "limitnum": ("number", False),
        "userid": ("string", False),
        "status": ("string", False),
    },
    "get_products": {"pid": ("string", False), "gid": ("string", False)},
    "get_tickets": {
        "limitstart": ("number", False),
        "limitnum": ("number", False),
        "clientid": ("string", False),
        "status": ("string", False),
    },
}

EXPECTED_ACTIONS = {
    "get_client_details": "GetClientsDetails",
    "get_clients": "GetClients",
    "get_invoices": "GetInvoices",
    "get_orders": "GetOrders",
    "get_products": "GetProducts",
    "get_tickets": "GetTickets",
}


class TestCatalog:
    def test_exactly_one_descriptor_per_tool(self):
        names = [tool.name for tool in list_tools()]
        assert sorted(names) == sorted(EXPECTED_SCHEMAS)
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("name", sorted(EXPECTED_SCHEMAS))
    def test_parameter_schema(self, name):
        tool = get_tool(name)
        declared = {p.name: (p.type, p.required) for p in tool.parameters}
        assert declared == EXPECTED_SCHEMAS[name]
        assert all(p.description for p in tool.parameters)
        assert tool.description

    @pytest.mark.parametrize("name,action", sorted(EXPECTED_ACTIONS.items()))
    def test_remote_action(self, name, action):
        assert get_tool(name).action == action

    def test_input_schema_with_required_field(self):
        schema = get_tool("get_client_details").input_schema()
        assert schema == {
            "type": "object",
            "properties": {"clientid": {"type": "string", "description": "Client ID"}},
            "required": ["clientid"],
        }

    def test_input_schema_without_required_fields(self):
        schema = get_tool("get_products").input_schema()
        assert "required" not in schema
        assert set(schema["properties"]) == {"pid", "gid"}

    def test_list_tools_returns_a_copy(self):
        tools = list_tools()
        tools.clear()
        assert len(list_tools()) == 6


class TestGetTool:
    def test_unknown_tool(self):
        with pytest.raises(UnknownToolError) as exc_info:
            get_tool("delete_everything")
        assert "delete_everything" in str(exc_info.value)
        assert exc_info.value.kind == ErrorKind.UNKNOWN_TOOL

    def test_lookup_is_exact(self):
        with pytest.raises(UnknownToolError):
            get_tool("GET_CLIENTS")


class TestDecodeArguments:
    def test_required_field(self):
        query = decode_arguments(get_tool("get_client_details"), {"clientid": "42"})
        assert query == ClientDetailsQuery(clientid="42")

    def test_missing_required_field(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            decode_arguments(get_tool("get_client_details"), {})
        assert exc_info.value.problems == ["clientid is required"]
        assert exc_info.value.kind == ErrorKind.INVALID_ARGUMENTS

    def test_null_required_field(self):
        with pytest.raises(InvalidArgumentsError):
            decode_arguments(get_tool("get_client_details"), {"clientid": None})

    def test_integer_id_becomes_string(self):
        query = decode_arguments(get_tool("get_client_details"), {"clientid": 42})
        assert query.clientid == "42"

    def test_empty_arguments(self):
        query = decode_arguments(get_tool("get_clients"), {})
        assert query == ClientListQuery()
        assert query.to_form() == {}

    def test_none_arguments(self):
        assert decode_arguments(get_tool("get_tickets"), None) == TicketQuery()

    def test_integral_float_becomes_int(self):
        query = decode_arguments(get_tool("get_clients"), {"limitstart": 25.0, "limitnum": 10})
        assert query.limitstart == 25
        assert query.to_form() == {"limitstart": "25", "limitnum": "10"}

    @pytest.mark.parametrize("value", [-1, 2.5, "10", True])
    def test_bad_numbers(self, value):
        with pytest.raises(InvalidArgumentsError):
            decode_arguments(get_tool("get_invoices"), {"limitnum": value})

    def test_bad_string(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            decode_arguments(get_tool("get_orders"), {"status": ["Pending"]})
        assert "status must be a string" in str(exc_info.value)

    def test_all_problems_reported_together(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            decode_arguments(get_tool("get_tickets"), {"limitstart": -5, "status": 3.5})
        assert len(exc_info.value.problems) == 2

    def test_undeclared_arguments_are_dropped(self):
        query = decode_arguments(get_tool("get_products"), {"pid": "7", "secret": "stolen"})
        assert query.to_form() == {"pid": "7"}
