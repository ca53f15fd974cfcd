# md2drupal/markdown/preprocessors/__init__.py

from .front_matter import front_matter_extractor

PREPROCESSORS = [
    front_matter_extractor,  # Must run first, the body is all later stages see
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
