"""
Data Module - Built-in sample content and display defaults

The sample content replaces backend data on the public page whenever the
backend cannot be read. It is fixed and not configurable.
"""

from models import PortfolioProfile, Project

DEFAULT_HERO_TITLE = 'Interactive Portfolio'
DEFAULT_HERO_SUBTITLE = 'Modern, playful, and tech-forward.'
DEFAULT_ABOUT = 'This portfolio showcases a collection of interactive experiments and client work.'


def get_fallback_profile():
    """Return the sample portfolio profile"""
    return PortfolioProfile(
        hero_title="Hey, I'm Alex — Creative Developer",
        hero_subtitle='I build playful, interactive web experiences.',
        about='I love crafting modern, interactive interfaces that feel alive.',
        socials=[
            {'label': 'GitHub', 'url': 'https://github.com/', 'icon': 'github'},
            {'label': 'LinkedIn', 'url': 'https://linkedin.com/', 'icon': 'linkedin'},
        ],
    )


def get_fallback_projects():
    """Return the sample project list"""
    return [
        Project(
            title='Toybox UI',
            description='A playful component kit with physics.',
            tags=['react', 'framer-motion'],
            featured=True,
            order=1,
            link='#',
        ),
        Project(
            title='3D Playground',
            description='WebGL experiments and microgames.',
            tags=['threejs', 'spline'],
            order=2,
        ),
    ]


def get_display_profile(profile):
    """
    Profile text as shown on the public page

    Empty text falls back to the display defaults; socials pass through.
    """
    if profile is None:
        return {
            'hero_title': DEFAULT_HERO_TITLE,
            'hero_subtitle': DEFAULT_HERO_SUBTITLE,
            'about': DEFAULT_ABOUT,
            'socials': [],
        }
    return {
        'hero_title': profile.hero_title or DEFAULT_HERO_TITLE,
        'hero_subtitle': profile.hero_subtitle or DEFAULT_HERO_SUBTITLE,
        'about': profile.about or DEFAULT_ABOUT,
        'socials': list(profile.socials),
    }
