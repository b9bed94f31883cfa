from datetime import datetime

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.platform.types.utc_datetime import UtcDateTime


class WebinarModel(Base):
    __tablename__ = 'webinar'

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    organizer_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[datetime] = mapped_column(UtcDateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(UtcDateTime, nullable=False)
    seats: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self):
        return f'<WebinarModel(id={self.id}, organizer_id={self.organizer_id}, seats={self.seats})>'
