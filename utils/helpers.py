"""
Helpers Module - Pure data-shaping functions shared by the views

Every function here returns new objects and leaves its inputs untouched,
so the editor state can be rebuilt on each input event.
"""

from models import DEFAULT_SOCIAL_ICON, PortfolioProfile, ProjectDraft, SocialLink

PROFILE_TEXT_FIELDS = ('hero_title', 'hero_subtitle', 'about')
SOCIAL_FIELDS = ('label', 'url', 'icon')

SOCIAL_ICONS = {
    'github': '🐙',
    'linkedin': '💼',
    'twitter': '🐦',
    'x': '🐦',
    'globe': '🌐',
    'dribbble': '🏀',
    'behance': '🎨',
}
GENERIC_LINK_ICON = '🔗'


def _text(value, name):
    """Form text as str; None becomes empty text"""
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValueError(f"{name} must be text, got {type(value).__name__}")
    return value


def split_tags(text):
    """
    Split comma separated tag input

    A list of tags (the JSON wire shape) is accepted too; each item is
    trimmed and empty items are dropped.

    Example:
        >>> split_tags('react, threejs, ')
        ['react', 'threejs']

    Raises:
        ValueError: A tag that is not text
    """
    if not text:
        return []
    if isinstance(text, (list, tuple)):
        pieces = [_text(tag, 'tag') for tag in text]
    else:
        pieces = _text(text, 'tags').split(',')
    return [tag.strip() for tag in pieces if tag.strip()]


def new_social_link():
    """Blank social entry as added by the editor"""
    return SocialLink(label='', url='', icon=DEFAULT_SOCIAL_ICON)


def append_social(socials):
    """Return a copy of socials with one blank entry at the end"""
    return [s.model_copy() for s in socials] + [new_social_link()]


def update_social(socials, index, field, value):
    """
    Return a copy of socials where only socials[index].field is replaced

    Args:
        socials (list[SocialLink]): Current entries
        index (int): Position of the entry to edit
        field (str): One of label, url, icon
        value (str): New text

    Raises:
        ValueError: Unknown field
        IndexError: Index outside the list
    """
    if field not in SOCIAL_FIELDS:
        raise ValueError(f"Unknown social link field: {field}")
    if not 0 <= index < len(socials):
        raise IndexError(f"Social link index out of range: {index}")

    updated = [s.model_copy() for s in socials]
    updated[index] = SocialLink.model_validate(
        {**socials[index].model_dump(), field: value if value is not None else ''}
    )
    return updated


def update_profile_field(profile, field, value):
    """Return a copy of profile with one text field replaced"""
    if field not in PROFILE_TEXT_FIELDS:
        raise ValueError(f"Unknown profile field: {field}")
    return PortfolioProfile.model_validate(
        {**profile.model_dump(), field: value if value is not None else ''}
    )


def remove_project(projects, project_id):
    """Return projects without the entries whose id equals project_id"""
    project_id = str(project_id)
    return [p for p in projects if p.id != project_id]


def is_checked(value):
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('on', 'true', '1', 'yes')


def build_project_draft(form):
    """
    Build a ProjectDraft from create-form inputs

    Args:
        form (Mapping): title, description, tags, image_url, link,
            featured, order

    Raises:
        ValueError: Empty or non-text title, non-integer order, or any
            other field of the wrong type
    """
    title = _text(form.get('title'), 'title').strip()
    if not title:
        raise ValueError('Project title is required')

    order_raw = form.get('order')
    if isinstance(order_raw, bool):
        raise ValueError(f"Order must be a whole number, got {order_raw!r}")
    if isinstance(order_raw, int):
        order = order_raw
    else:
        order_raw = _text(order_raw, 'order').strip()
        try:
            order = int(order_raw) if order_raw else 0
        except ValueError:
            raise ValueError(f"Order must be a whole number, got {order_raw!r}")

    return ProjectDraft(
        title=title,
        description=_text(form.get('description'), 'description'),
        tags=split_tags(form.get('tags')),
        image_url=_text(form.get('image_url'), 'image_url').strip() or None,
        link=_text(form.get('link'), 'link').strip() or None,
        featured=is_checked(form.get('featured', False)),
        order=order,
    )


def social_icon(name):
    """Display glyph for a social icon name"""
    key = (name or 'globe').lower()
    return SOCIAL_ICONS.get(key, GENERIC_LINK_ICON)
