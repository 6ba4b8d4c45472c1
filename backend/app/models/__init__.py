"""SQLAlchemy model package; importing it registers every table on the metadata."""

from app.models.user import User
from app.models.site_content import LogoAndName, SiteSettings, ContactInfo, SiteStats
from app.models.home import HeroSlide, CeoSection, LearnMoreSection
from app.models.project import ProjectCategory, Project, PortfolioHeader
from app.models.about import AboutIntro, PhilosophyPrinciple, Collaboration, PracticeTimeline, OfficeGalleryImage
from app.models.team import TeamMember, StaffIntro, JoinTeamCta
from app.models.careers import HiringStatus, JobPosition
from app.models.contact import ContactSubmission

__all__ = [
    "User",
    "LogoAndName", "SiteSettings", "ContactInfo", "SiteStats",
    "HeroSlide", "CeoSection", "LearnMoreSection",
    "ProjectCategory", "Project", "PortfolioHeader",
    "AboutIntro", "PhilosophyPrinciple", "Collaboration", "PracticeTimeline", "OfficeGalleryImage",
    "TeamMember", "StaffIntro", "JoinTeamCta",
    "HiringStatus", "JobPosition",
    "ContactSubmission",
]
