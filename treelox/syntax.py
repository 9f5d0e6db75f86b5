"""Syntax tree node types.

Each node kind is generated from its field list by make_syntax_tree_node and
attached to its base class, so ``Expr.Binary`` and ``Stmt.While`` are real
classes. Nodes expose ``__match_args__`` so passes over the tree destructure
them with ``match`` instead of double dispatch.
"""


def make_syntax_tree_node(base_class, name, *attrs):
    def __init__(self, *values):
        if len(values) != len(attrs):
            message = f"{name}.__init__() take {len(attrs)} positional arguments but {len(values)} were given"
            raise TypeError(message)

        for attr, value in zip(attrs, values):
            setattr(self, attr, value)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, attr) == getattr(other, attr) for attr in attrs)

    def __repr__(self):
        fields = ", ".join(f"{attr}={getattr(self, attr)!r}" for attr in attrs)
        return f"{base_class.__name__}.{name}({fields})"

    subclass = type(
        name, (base_class,),
        {
            "__init__": __init__,
            "__eq__": __eq__,
            "__hash__": object.__hash__,
            "__repr__": __repr__,
            "__match_args__": attrs,
            "__qualname__": f"{base_class.__name__}.{name}",
        })

    setattr(base_class, name, subclass)


class Expr:
    pass


class Stmt:
    pass


# Expr subclasses
make_syntax_tree_node(Expr, "Assign", "name", "value")
make_syntax_tree_node(Expr, "Binary", "left", "operator", "right")
make_syntax_tree_node(Expr, "Call", "callee", "paren", "arguments")
make_syntax_tree_node(Expr, "Grouping", "expression")
make_syntax_tree_node(Expr, "Literal", "value")
make_syntax_tree_node(Expr, "Logical", "left", "operator", "right")
make_syntax_tree_node(Expr, "Unary", "operator", "right")
make_syntax_tree_node(Expr, "Variable", "name")

# Stmt subclasses
make_syntax_tree_node(Stmt, "Block", "statements")
make_syntax_tree_node(Stmt, "Break", "keyword")
make_syntax_tree_node(Stmt, "Expression", "expression")
make_syntax_tree_node(Stmt, "Function", "name", "params", "body")
make_syntax_tree_node(Stmt, "If", "condition", "then_branch", "else_branch")
make_syntax_tree_node(Stmt, "Print", "expression")
make_syntax_tree_node(Stmt, "Return", "keyword", "value")
make_syntax_tree_node(Stmt, "Var", "name", "initializer")
make_syntax_tree_node(Stmt, "While", "condition", "body")
