# md2drupal/markdown/postprocessors/__init__.py

from .cms_fixup import cms_fixup
from .code_fence_normalizer import code_fence_normalizer
from .image_unwrapper import image_unwrapper

POSTPROCESSORS = [
    code_fence_normalizer,  # Language class from <pre> onto <code>, part of lowering
    cms_fixup,  # Heading ids, table/image wrappers, code languages
    image_unwrapper,  # Lift image wrappers out of paragraphs, needs cms_fixup first
    # Order matters - they run sequentially
]


def apply_postprocessors(soup, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        soup = processor(soup, context)
    return soup
