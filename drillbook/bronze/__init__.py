"""Entry-level problems: geometry, complete search, simulation, ad hoc and small graphs."""