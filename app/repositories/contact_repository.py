from sqlalchemy.orm import Session
from app.models.contact import Contact


class ContactRepository:
    """Repository for Contact model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_account_number(self, account_number: str, company_id: str) -> list[Contact]:
        """Get contacts of an account, main contact first"""
        return (
            self.db.query(Contact)
            .filter(Contact.account_number == account_number, Contact.company_id == company_id)
            .order_by(Contact.is_main_contact.desc(), Contact.name)
            .all()
        )

    def get_by_id_and_company(self, contact_id: str, company_id: str) -> Contact | None:
        return (
            self.db.query(Contact)
            .filter(Contact.id == contact_id, Contact.company_id == company_id)
            .first()
        )

    def clear_main_contact(self, account_number: str, company_id: str, except_id: str | None = None) -> None:
        """
        Unset is_main_contact on every contact of an account without committing.
        Caller commits together with the contact that becomes main.
        """
        query = self.db.query(Contact).filter(
            Contact.account_number == account_number,
            Contact.company_id == company_id,
            Contact.is_main_contact.is_(True),
        )
        if except_id is not None:
            query = query.filter(Contact.id != except_id)
        for contact in query.all():
            contact.is_main_contact = False

    def reassign_account_number(self, old_number: str, new_number: str, company_id: str) -> None:
        """Move contacts to a renamed account number without committing"""
        for contact in self.get_by_account_number(old_number, company_id):
            contact.account_number = new_number

    def delete_by_account_number(self, account_number: str, company_id: str) -> None:
        """Delete an account's contacts without committing"""
        for contact in self.get_by_account_number(account_number, company_id):
            self.db.delete(contact)

    def create(self, contact: Contact) -> Contact:
        self.db.add(contact)
        self.db.commit()
        self.db.refresh(contact)
        return contact

    def update(self, contact: Contact) -> Contact:
        self.db.commit()
        self.db.refresh(contact)
        return contact

    def delete(self, contact: Contact) -> None:
        self.db.delete(contact)
        self.db.commit()
