"""Tests for declared/used variable counting."""

from halstead_insight.metrics.variables import variable_usage


class TestVariableUsage:
    def test_declarations_reference_their_own_names(self, parse_js):
        """A declarator's binding is itself an identifier, so it counts as used."""
        usage = variable_usage(parse_js("let a = 1; const b = a; var c;"))
        assert usage.declared == {"a", "b", "c"}
        assert usage.live == {"a", "b", "c"}
        assert usage.declared_count == 3
        assert usage.live_count == 3

    def test_destructuring_patterns_are_not_declared(self, parse_js):
        usage = variable_usage(parse_js("const { p, q } = obj; let r = 2;"))
        assert usage.declared == {"r"}
        assert "obj" in usage.referenced
        assert usage.live_count == 1

    def test_parameters_are_not_declarations(self, parse_js):
        usage = variable_usage(parse_js("function f(x) { return x; }"))
        assert usage.declared_count == 0
        assert usage.live_count == 0
        assert {"f", "x"} <= usage.referenced

    def test_live_never_exceeds_declared(self, parse_js):
        source = "let a = 1, b = 2;\nfunction g() { let c = a; return c + z; }\nconst [d] = list;"
        usage = variable_usage(parse_js(source))
        assert usage.live_count <= usage.declared_count
        assert usage.live <= usage.declared

    def test_empty_program(self, parse_js):
        usage = variable_usage(parse_js(""))
        assert usage.declared_count == 0
        assert usage.live_count == 0
