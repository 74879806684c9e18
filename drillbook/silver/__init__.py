"""Intermediate problems: prefix sums, two pointers, sorting, graphs and grids."""