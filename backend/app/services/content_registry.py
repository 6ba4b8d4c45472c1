"""Resource definitions for every content type: which pages show it, which assets it owns, its fallbacks."""

from app.models.about import AboutIntro, Collaboration, OfficeGalleryImage, PhilosophyPrinciple, PracticeTimeline
from app.models.careers import HiringStatus, JobPosition
from app.models.home import CeoSection, HeroSlide, LearnMoreSection
from app.models.project import PortfolioHeader, Project, ProjectCategory
from app.models.site_content import ContactInfo, LogoAndName, SiteSettings, SiteStats
from app.models.team import JoinTeamCta, StaffIntro, TeamMember
from app.services.content_service import CollectionResource, SingletonResource

TEAM_ROLES = ("ceo", "leadership", "manager", "staff")
PROJECT_STATUSES = ("upcoming", "ongoing", "completed")


def _detach_category_projects(db, category: ProjectCategory) -> None:
    # Projects of a deleted category become uncategorized.
    db.query(Project).filter(Project.category_id == category.id).update(
        {Project.category_id: None}, synchronize_session=False
    )


# Singletons

logo_and_name = SingletonResource(
    LogoAndName,
    "Logo and name",
    layout_pages=("/",),
    defaults={"logo_url": "/logo.png", "company_name": "Land8Form", "company_name_color": "#000000"},
    insert_defaults={"logo_url": "/logo.png"},
    asset_fields={"logo_url": "logos"},
)

site_settings = SingletonResource(
    SiteSettings,
    "Site settings",
    layout_pages=("/",),
    defaults={
        "background_color": "#ffffff",
        "primary_accent_color": "#c9a96e",
        "text_color": "#1a1a1a",
        "secondary_text_color": "#6b6b6b",
        "font_family": "Inter",
    },
)

ceo_section = SingletonResource(
    CeoSection,
    "CEO section",
    pages=("/", "/staff", "/about"),
    defaults={
        "photo_url": "/ceo-placeholder.jpg",
        "name": "CEO Name",
        "title": "CEO",
        "vision": None,
        "description": None,
    },
    insert_defaults={"photo_url": "/ceo-placeholder.jpg", "name": "CEO Name", "title": "CEO"},
    asset_fields={"photo_url": "team-photos"},
)

learn_more_section = SingletonResource(
    LearnMoreSection,
    "Learn more section",
    pages=("/",),
    defaults={
        "heading": "Designing spaces that last",
        "description": "Discover how our studio approaches architecture, interiors and landscape.",
        "image_url": None,
        "button_text": "Learn More",
    },
    asset_fields={"image_url": "general"},
)

contact_info = SingletonResource(
    ContactInfo,
    "Contact info",
    pages=("/contact", "/"),
    defaults={
        "linkedin_url": None,
        "instagram_url": None,
        "youtube_url": None,
        "pinterest_url": None,
        "email": None,
        "phone_number": None,
        "telephone_number": None,
        "address": None,
        "google_maps_url": None,
    },
)

portfolio_header = SingletonResource(
    PortfolioHeader,
    "Portfolio header",
    pages=("/projects",),
    defaults={
        "heading": "Our Projects",
        "subheading": "Selected work",
        "description": None,
        "heading_color": None,
        "subheading_color": None,
        "description_color": None,
        "default_items_count": 10,
    },
)

about_intro = SingletonResource(
    AboutIntro,
    "About intro",
    pages=("/about",),
    defaults={
        "heading": "About Us",
        "subheading": None,
        "description": None,
        "heading_color": None,
        "description_color": None,
    },
)

staff_intro = SingletonResource(
    StaffIntro,
    "Staff intro",
    pages=("/staff",),
    defaults={"heading": "Our Team", "subheading": None, "description": None},
)

join_team_cta = SingletonResource(
    JoinTeamCta,
    "Join team call to action",
    pages=("/staff", "/about"),
    defaults={
        "heading": "Join Our Team",
        "description": "We are always looking for talented people.",
        "button_text": "View Careers",
    },
)

HIRING_STATUS_DEFAULTS = {
    "is_hiring": False,
    "hiring_title": "We're Hiring!",
    "hiring_description": "We have open positions available. Check out our career opportunities.",
    "not_hiring_title": "No Current Openings",
    "not_hiring_description": (
        "We don't have any open positions at the moment, but feel free to send us your resume."
    ),
}

hiring_status = SingletonResource(
    HiringStatus,
    "Hiring status",
    pages=("/careers",),
    defaults=HIRING_STATUS_DEFAULTS,
    insert_defaults=HIRING_STATUS_DEFAULTS,
)

site_stats = SingletonResource(
    SiteStats,
    "Site stats",
    pages=("/about",),
    defaults={"total_projects": 0, "team_members": 0, "completed_projects": 0, "years_of_experience": 0},
)

# Ordered collections

hero_slides = CollectionResource(
    HeroSlide,
    "Hero slide",
    pages=("/",),
    asset_fields={"image_url": "hero-images"},
)

team_members = CollectionResource(
    TeamMember,
    "Team member",
    pages=("/staff", "/about"),
    asset_fields={"photo_url": "team-photos"},
)

project_categories = CollectionResource(
    ProjectCategory,
    "Project category",
    pages=("/",),
    layout_pages=("/projects",),
    before_delete=_detach_category_projects,
)

projects = CollectionResource(
    Project,
    "Project",
    pages=("/",),
    layout_pages=("/projects",),
    visibility_field=None,
    asset_fields={"image_url": "project-images"},
    multi_asset_fields={"gallery_images": "project-images"},
)

philosophy_principles = CollectionResource(
    PhilosophyPrinciple,
    "Philosophy principle",
    pages=("/about",),
    asset_fields={"icon_url": "general"},
)

collaborations = CollectionResource(
    Collaboration,
    "Collaboration",
    pages=("/about", "/"),
    asset_fields={"logo_url": "collaborations"},
)

practice_timeline = CollectionResource(
    PracticeTimeline,
    "Timeline event",
    pages=("/about",),
    visibility_field=None,
    admin_order_by=lambda model: [model.year.desc(), model.display_order.asc(), model.id.asc()],
)

office_gallery = CollectionResource(
    OfficeGalleryImage,
    "Office gallery image",
    pages=("/about",),
    asset_fields={"image_url": "office-gallery"},
)

job_positions = CollectionResource(
    JobPosition,
    "Job position",
    pages=("/careers",),
)

SINGLETONS = {
    "logo-and-name": logo_and_name,
    "site-settings": site_settings,
    "ceo-section": ceo_section,
    "learn-more": learn_more_section,
    "contact-info": contact_info,
    "portfolio-header": portfolio_header,
    "about-intro": about_intro,
    "staff-intro": staff_intro,
    "join-team-cta": join_team_cta,
    "hiring-status": hiring_status,
    "site-stats": site_stats,
}

COLLECTIONS = {
    "hero-slides": hero_slides,
    "team-members": team_members,
    "project-categories": project_categories,
    "projects": projects,
    "philosophy-principles": philosophy_principles,
    "collaborations": collaborations,
    "timeline": practice_timeline,
    "office-gallery": office_gallery,
    "job-positions": job_positions,
}
