from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JSONType, new_id


class Contract(Base):
    """
    A rendered contract (offer) created from a template.

    The rendered text and HTML are stored as created; editing a contract
    means rendering a new one.
    """
    __tablename__ = 'contract'

    id = Column(Text, primary_key=True, default=new_id)
    template_id = Column(Text, ForeignKey('contract_template.id'), nullable=False)
    employee_id = Column(Text, ForeignKey('employee.id', ondelete='SET NULL'), nullable=True)

    candidate_name = Column(Text)
    candidate_email = Column(Text)

    variables = Column(JSONType, default=dict)
    body_markdown = Column(Text, nullable=False)
    body_html = Column(Text, nullable=False)
    unresolved_placeholders = Column(JSONType, default=list)

    status = Column(Text, nullable=False, default='draft')  # draft, sent, signed, declined

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    template = relationship("ContractTemplate", back_populates="contracts")
    employee = relationship("Employee", back_populates="contracts")

    __table_args__ = (
        Index('idx_contract_template', 'template_id'),
        Index('idx_contract_employee', 'employee_id'),
    )
