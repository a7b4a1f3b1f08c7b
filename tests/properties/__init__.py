"""
Property-based testing using Hypothesis.

Modules:
    test_time_value_properties: round trip, error precedence, repeated vs
        explicit equivalence, due/regular consistency
"""
