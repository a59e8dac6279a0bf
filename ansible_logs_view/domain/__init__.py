"""Domain layer: pure parsing, filtering and navigation logic.

Subpackages:
    shared - Result type and the diagnostic sink port
    log    - Task records, parser, store and filter engine
    view   - Tree model, navigation controller, layout and rendering
"""
