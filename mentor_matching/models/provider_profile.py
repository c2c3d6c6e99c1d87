from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, JSON, String, Text

from .base import Base


class ProviderProfile(Base):
    __tablename__ = "provider_profiles"

    id = Column(String, primary_key=True)
    user_id = Column(String)
    display_name = Column(String)
    tagline = Column(Text)
    program_name = Column(String)
    program_year = Column(Integer)
    specialties = Column(JSON)
    previous_icu_type = Column(String)
    is_paused = Column(Boolean, default=False)
    status = Column(String, default="pending")
    availability_status = Column(String, default="available")
    next_available_slot = Column(DateTime(timezone=True))
    average_rating = Column(Float)
    total_bookings = Column(Integer, default=0)
    response_time_hours = Column(Float)
    created_at = Column(DateTime, default=datetime.utcnow)
