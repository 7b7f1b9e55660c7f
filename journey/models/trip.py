from sqlalchemy import Column, String, Boolean, DateTime, Uuid
from sqlalchemy.orm import relationship
from journey.core.database import Base
import uuid

class Trip(Base):
    __tablename__ = "trips"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    destination = Column(String(255), nullable=False)
    owner_email = Column(String(255), nullable=False)
    owner_name = Column(String(255), nullable=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)
    starts_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=False)

    participants = relationship("Participant", back_populates="trip", cascade="all, delete")
    activities = relationship("Activity", back_populates="trip", cascade="all, delete")

    def __repr__(self):
        return f"<Trip id={self.id} destination={self.destination!r}>"
