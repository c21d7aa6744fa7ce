"""Tests for definition classification and tree walks."""

from codedef.definitions.walker import (
    MAX_DEFINITION_SEARCH_DEPTH,
    classify,
    contains_row,
    last_line,
    walk_outline,
    walk_point,
)


class TestContainsRow:
    """Test the row containment rule."""
    
    def test_rows_inside_span(self, fake_node):
        """Test that start, middle and end rows are contained."""
        node = fake_node("function_definition", start=(2, 0), end=(5, 1))
        assert contains_row(node, 2)
        assert contains_row(node, 4)
        assert contains_row(node, 5)
    
    def test_rows_outside_span(self, fake_node):
        """Test rows before and after the span."""
        node = fake_node("function_definition", start=(2, 0), end=(5, 1))
        assert not contains_row(node, 1)
        assert not contains_row(node, 6)
    
    def test_end_at_column_zero_excludes_last_row(self, fake_node):
        """Test that a span ending at column 0 does not occupy that row."""
        node = fake_node("preproc_def", start=(0, 0), end=(1, 0))
        assert contains_row(node, 0)
        assert not contains_row(node, 1)
    
    def test_last_line_follows_column_zero_rule(self, fake_node):
        """Test the reported 1-based end line."""
        assert last_line(fake_node("preproc_def", start=(0, 0), end=(1, 0))) == 1
        assert last_line(fake_node("function_definition", start=(0, 0), end=(2, 1))) == 3
        assert last_line(fake_node("translation_unit", start=(0, 0), end=(0, 0))) == 1


class TestClassify:
    """Test the shared classification rule."""
    
    def test_primary_definition(self, fake_node, c_profile):
        """Test that a function is a definition and does not set the flag."""
        result = classify(fake_node("function_definition"), c_profile, False)
        assert result.is_definition
        assert not result.is_typedef_child
        assert not result.child_typedef_flag
    
    def test_typedef_sets_flag_for_children(self, fake_node, c_profile):
        """Test that the alias kind propagates the flag."""
        result = classify(fake_node("type_definition"), c_profile, False)
        assert result.is_definition
        assert not result.is_typedef_child
        assert result.child_typedef_flag
    
    def test_compound_with_body(self, fake_node, c_profile):
        """Test that a struct with a field list is a definition."""
        struct = fake_node("struct_specifier", children=[
            fake_node("struct"),
            fake_node("field_declaration_list"),
        ])
        assert classify(struct, c_profile, False).is_definition
        assert classify(struct, c_profile, True).is_typedef_child
    
    def test_forward_declaration_is_not_definition(self, fake_node, c_profile):
        """Test that a struct without a body is not a definition."""
        struct = fake_node("struct_specifier", children=[
            fake_node("struct"),
            fake_node("type_identifier"),
        ])
        result = classify(struct, c_profile, True)
        assert not result.is_definition
        assert not result.is_typedef_child
        assert result.child_typedef_flag
    
    def test_other_nodes_pass_flag_through(self, fake_node, c_profile):
        """Test that non-definitions keep the ancestor flag."""
        assert classify(fake_node("declaration"), c_profile, True).child_typedef_flag
        assert not classify(fake_node("declaration"), c_profile, False).child_typedef_flag


class TestWalkOutline:
    """Test whole-tree walks over real C."""
    
    def test_collects_all_definitions_in_preorder(self, parse_c, c_profile, sample_c):
        """Test that every definition is collected, typedef payload flagged."""
        _, root = parse_c(sample_c)
        definitions = walk_outline(root, c_profile)
        
        kinds = [(d.kind, d.is_typedef_child) for d in definitions]
        assert kinds == [
            ("preproc_def", False),
            ("struct_specifier", False),
            ("type_definition", False),
            ("struct_specifier", True),
            ("function_definition", False),
        ]
    
    def test_forward_declarations_skipped(self, parse_c, c_profile):
        """Test that struct uses without a body are not collected."""
        _, root = parse_c("struct Foo;\nstruct Foo *make(void);\nunion U;\nenum E;\n")
        assert walk_outline(root, c_profile) == []
    
    def test_flag_reaches_nested_compounds(self, parse_c, c_profile):
        """Test that compounds nested deeper inside a typedef are flagged too."""
        _, root = parse_c(
            "typedef struct {\n"
            "    struct Inner {\n"
            "        int a;\n"
            "    } inner;\n"
            "} Outer;\n"
        )
        definitions = walk_outline(root, c_profile)
        assert [d.kind for d in definitions] == ["type_definition", "struct_specifier", "struct_specifier"]
        assert [d.is_typedef_child for d in definitions] == [False, True, True]
    
    def test_records_spans(self, parse_c, c_profile):
        """Test line numbers and byte sizes of a record."""
        source, root = parse_c("int add(int a, int b) {\n    return a + b;\n}\n")
        (definition,) = walk_outline(root, c_profile)
        assert definition.start_line == 1
        assert definition.end_line == 3
        assert definition.byte_span_size == len(source.rstrip(b"\n"))
    
    def test_depth_guard_stops_descent(self, fake_node, c_profile):
        """Test that nodes at or beyond the depth limit are not visited."""
        def chain(depth_of_definition):
            node = fake_node("function_definition", start=(0, 0), end=(0, 5), end_byte=5)
            for _ in range(depth_of_definition):
                node = fake_node("compound_statement", start=(0, 0), end=(0, 5), end_byte=5, children=[node])
            return node
        
        reachable = walk_outline(chain(MAX_DEFINITION_SEARCH_DEPTH - 1), c_profile)
        assert [d.kind for d in reachable] == ["function_definition"]
        
        assert walk_outline(chain(MAX_DEFINITION_SEARCH_DEPTH), c_profile) == []
    
    def test_depth_guard_stops_point_walk(self, fake_node, c_profile):
        """Test that the point walk stops at the same depth limit."""
        def chain(depth_of_definition):
            node = fake_node("function_definition", start=(0, 0), end=(2, 1), end_byte=5)
            for _ in range(depth_of_definition):
                node = fake_node("compound_statement", start=(0, 0), end=(2, 1), end_byte=5, children=[node])
            return node
        
        source = b" " * 5
        reachable = walk_point(chain(MAX_DEFINITION_SEARCH_DEPTH - 1), source, 1, c_profile)
        assert [d.kind for d in reachable] == ["function_definition"]
        
        assert walk_point(chain(MAX_DEFINITION_SEARCH_DEPTH), source, 1, c_profile) == []


class TestWalkPoint:
    """Test point walks over real C."""
    
    SOURCE = (
        "int first(void) {\n"
        "    return 1;\n"
        "}\n"
        "\n"
        "int second(void) {\n"
        "    return 2;\n"
        "}\n"
    )
    
    def test_prunes_other_definitions(self, parse_c, c_profile):
        """Test that only definitions containing the row are collected."""
        source, root = parse_c(self.SOURCE)
        definitions = walk_point(root, source, 5, c_profile)
        assert len(definitions) == 1
        assert definitions[0].text.startswith("int second(void)")
    
    def test_blank_line_between_definitions(self, parse_c, c_profile):
        """Test that a row between definitions matches nothing."""
        source, root = parse_c(self.SOURCE)
        assert walk_point(root, source, 3, c_profile) == []
    
    def test_typedef_and_payload_both_collected(self, parse_c, c_profile):
        """Test that a row in a typedef'd struct body yields both records."""
        source, root = parse_c("typedef struct {\n    int x;\n} Point;\n")
        definitions = walk_point(root, source, 1, c_profile)
        assert [(d.kind, d.is_typedef_child) for d in definitions] == [
            ("type_definition", False),
            ("struct_specifier", True),
        ]
