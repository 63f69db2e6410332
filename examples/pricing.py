"""Pricing example.

This example builds a small pricing graph with a session, evaluates it,
changes an input and shows which cached values were invalidated.

    price * quantity -> subtotal
    subtotal == 0    -> "free" / subtotal
"""

import flowgraph as fg
from flowgraph import EdgeSource, EdgeTarget

session = fg.GraphSession()

# Inputs (editable constants)
price = session.add_node("numberLiteral", config=[12.5])
quantity = session.add_node("numberLiteral", config=[4])

# Arithmetic
subtotal = session.add_node("multiply")
session.add_edge(EdgeSource(price.id), EdgeTarget(subtotal.id, 0))
session.add_edge(EdgeSource(quantity.id), EdgeTarget(subtotal.id, 1))

# Compare against the config fallback of the second socket (0)
is_free = session.add_node("compare")
session.add_edge(EdgeSource(subtotal.id), EdgeTarget(is_free.id, 0))

# Choose a label
label = session.add_node("conditional", config=[False, "free", 0])
session.add_edge(EdgeSource(is_free.id), EdgeTarget(label.id, 0))
session.add_edge(EdgeSource(subtotal.id), EdgeTarget(label.id, 2))

display = session.add_node("sink")
session.add_edge(EdgeSource(label.id), EdgeTarget(display.id))


if __name__ == "__main__":
    print(f"Total: {session.evaluate(display.id)}")  # noqa: T201

    purged = session.update_node_data(quantity.id, [0])
    print(f"Invalidated: {sorted(purged)}")  # noqa: T201
    print(f"Total: {session.evaluate(display.id)}")  # noqa: T201

    for node_id, trace in session.trace(display.id).items():
        print(f"{node_id}: {trace.inputs} -> {trace.output!r}")  # noqa: T201
