from sqlalchemy import Column, Text, Boolean, TIMESTAMP, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType


class ContractTemplate(Base):
    """
    Contract template stored as plain text with %{name} placeholders.

    body_html is derived from body_markdown whenever the text changes.
    Templates referenced by contracts are deactivated instead of deleted.
    """
    __tablename__ = 'contract_template'

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    employment_type = Column(Text, nullable=True, index=True)  # FULL_TIME, PART_TIME, CONTRACTOR, INTERN

    body_markdown = Column(Text, nullable=False)
    body_html = Column(Text, nullable=False)
    variable_schema = Column(JSONType, default=dict)  # name -> {label, type, required}

    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    contracts = relationship("Contract", back_populates="template")
