"""Staff page content: team members, staff intro and the join-the-team call to action."""

from sqlalchemy import Boolean, Column, Index, String, Text

from app.database import Base
from app.models.mixins import OrderedMixin, SingletonMixin


class TeamMember(OrderedMixin, Base):
    __tablename__ = "team_members"

    photo_url = Column(String(500))
    name = Column(String(100), nullable=False)
    position = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default="staff")  # ceo/leadership/manager/staff
    bio = Column(Text)
    email = Column(String(150))
    phone = Column(String(50))
    is_ceo = Column(Boolean, nullable=False, default=False)
    is_leadership = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        Index("idx_team_member_role", "role"),
    )


class StaffIntro(SingletonMixin, Base):
    __tablename__ = "staff_intro"

    heading = Column(String(200), nullable=False, default="Our Team")
    subheading = Column(String(300))
    description = Column(Text)


class JoinTeamCta(SingletonMixin, Base):
    __tablename__ = "join_team_cta"

    heading = Column(String(200), nullable=False, default="Join Our Team")
    description = Column(Text)
    button_text = Column(String(50), nullable=False, default="View Careers")
