from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType, new_id


class App(Base):
    """Third-party application that employees are provisioned into."""
    __tablename__ = 'app'

    id = Column(Text, primary_key=True, default=new_id)
    type = Column(Text, nullable=False)  # GOOGLE_WORKSPACE, SLACK, BITBUCKET, ...
    name = Column(Text, nullable=False)
    description = Column(Text)
    is_enabled = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    rules = relationship(
        "ProvisioningRuleRecord",
        back_populates="app",
        cascade="all, delete-orphan",
        order_by="ProvisioningRuleRecord.priority",
    )

    __table_args__ = (
        UniqueConstraint('type', 'name', name='uq_app_type_name'),
    )


class ProvisioningRuleRecord(Base):
    """
    Stored provisioning rule.

    condition: attribute name -> expected value (empty = baseline rule)
    provision_data: payload merged into the app's effective provisioning
    """
    __tablename__ = 'app_provisioning_rule'

    id = Column(Text, primary_key=True, default=new_id)
    app_id = Column(Text, ForeignKey('app.id', ondelete='CASCADE'), nullable=False)
    name = Column(Text, nullable=False)
    description = Column(Text)

    condition = Column(JSONType, default=dict)
    provision_data = Column(JSONType, default=dict)
    priority = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    app = relationship("App", back_populates="rules")

    __table_args__ = (
        Index('idx_rule_app_priority', 'app_id', 'priority'),
    )
