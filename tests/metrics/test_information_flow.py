"""Tests for call-graph construction and information flow."""

from halstead_insight.metrics.information_flow import CallGraphBuilder, information_flow
from halstead_insight.metrics.models import GLOBAL_SCOPE, FunctionNode, InformationFlow


def _edges(flow: InformationFlow) -> set[tuple[str, str]]:
    return {(f.name, callee) for f in flow.functions.values() for callee in f.fan_out}


class TestTwoFunctionScenario:
    """function a(){ b(); } function b(){}"""

    def test_counts(self, parse_js):
        flow = information_flow(parse_js("function a(){ b(); } function b(){}"))

        assert flow.function_count == 2
        assert flow.functions["a"].fan_out == {"b"}
        assert flow.functions["b"].fan_in == {"a"}
        assert flow.functions["a"].information_flow == 0
        assert flow.functions["b"].information_flow == 0
        assert flow.total_fan_in == 1
        assert flow.total_fan_out == 1
        assert flow.total_information_flow == 0
        # 1 fan-in + 1 fan-out + 0 flow
        assert flow.grand_total == 2


class TestScopeAttribution:
    def test_top_level_calls_belong_to_global(self, parse_js):
        flow = information_flow(parse_js("init();\nfunction init() {}"))
        assert flow.functions[GLOBAL_SCOPE].fan_out == {"init"}
        assert flow.functions["init"].fan_in == {GLOBAL_SCOPE}
        assert flow.function_count == 1

    def test_scope_is_restored_after_function_body(self, parse_js):
        flow = information_flow(parse_js("function a() {}\nb();"))
        assert flow.functions["a"].fan_out == set()
        assert flow.functions[GLOBAL_SCOPE].fan_out == {"b"}

    def test_call_after_nested_arrow_stays_with_outer_function(self, parse_js):
        source = "function outer() {\n  const cb = () => helper();\n  after();\n}"
        arrow = f"arrow@{source.index('() => helper')}"
        flow = information_flow(parse_js(source))

        assert flow.functions["outer"].fan_out == {"after"}
        assert flow.functions[arrow].fan_out == {"helper"}
        assert flow.functions["after"].fan_in == {"outer"}
        assert flow.functions["helper"].fan_in == {arrow}
        assert flow.function_count == 4

    def test_method_named_after_property_key(self, parse_js):
        flow = information_flow(parse_js("class C { run() { go(); } }"))
        assert flow.functions["run"].fan_out == {"go"}

    def test_named_function_expression_uses_its_name(self, parse_js):
        flow = information_flow(parse_js("const a = function named() { z(); };"))
        assert flow.functions["named"].fan_out == {"z"}
        assert "a" not in flow.functions


class TestAnonymousFunctions:
    def test_distinct_anonymous_functions_do_not_collide(self, parse_js):
        source = "const a = function() { x(); };\nconst b = function() { y(); };"
        first = source.index("function")
        second = source.index("function", first + 1)
        flow = information_flow(parse_js(source))

        assert flow.functions[f"anonymous@{first}"].fan_out == {"x"}
        assert flow.functions[f"anonymous@{second}"].fan_out == {"y"}

    def test_arrow_functions_named_by_offset(self, parse_js):
        source = "[1].map(v => f(v));\n[2].map(v => g(v));"
        flow = information_flow(parse_js(source))
        arrows = sorted(
            (name for name in flow.functions if name.startswith("arrow@")),
            key=lambda name: int(name.split("@")[1]),
        )
        assert arrows == [f"arrow@{source.index('v => f')}", f"arrow@{source.index('v => g')}"]


class TestCallResolution:
    def test_member_and_computed_calls_are_ignored(self, parse_js):
        flow = information_flow(parse_js("console.log(x);\nobj['m']();\nfoo();"))
        assert flow.functions[GLOBAL_SCOPE].fan_out == {"foo"}
        assert set(flow.functions) == {GLOBAL_SCOPE, "foo"}

    def test_recursion(self, parse_js):
        flow = information_flow(parse_js("function r() { r(); }"))
        node = flow.functions["r"]
        assert node.fan_in == {"r"}
        assert node.fan_out == {"r"}
        assert flow.total_information_flow == 1
        assert flow.grand_total == 3

    def test_repeated_calls_are_one_edge(self, parse_js):
        flow = information_flow(parse_js("function a() { b(); b(); b(); }"))
        assert flow.functions["a"].fan_out == {"b"}
        assert flow.total_fan_in == 1

    def test_fan_in_and_fan_out_sums_match_edges(self, parse_js):
        source = (
            "function main() { parse(); render(); }\n"
            "function parse() { tokenize(); validate(); }\n"
            "function render() { validate(); }\n"
            "const handler = () => { main(); log(); };\n"
            "main();\n"
        )
        flow = information_flow(parse_js(source))
        edges = _edges(flow)
        fan_in = sum(len(f.fan_in) for f in flow.functions.values())
        fan_out = sum(len(f.fan_out) for f in flow.functions.values())

        assert fan_in == fan_out == len(edges)
        for caller, callee in edges:
            assert caller in flow.functions[callee].fan_in


class TestEmptyAndBuilder:
    def test_no_functions(self, parse_js):
        flow = information_flow(parse_js("let x = 1;"))
        assert flow.function_count == 0
        assert flow.grand_total == 0
        assert flow.average_fan_in == 0.0
        assert flow.average_fan_out == 0.0

    def test_builder_records_edges_both_ways(self):
        builder = CallGraphBuilder()
        builder.enter_function("a")
        builder.record_call("b")
        builder.exit_function()
        builder.record_call("a")

        assert builder.current_scope == GLOBAL_SCOPE
        assert builder.functions["a"].fan_in == {GLOBAL_SCOPE}
        assert builder.functions["a"].fan_out == {"b"}
        assert builder.functions["b"].fan_in == {"a"}

    def test_information_flow_of_function_node(self):
        node = FunctionNode("f", fan_in={"a", "b"}, fan_out={"c", "d", "e"})
        assert node.information_flow == 6
