"""
SysDC: compile architecture descriptions into a checked, strongly-typed model.

The front door is compiler.Compiler (or compiler.compile_units);
the product is a structure.SysDCSystem.
"""
