"""Tests for students API."""

from datetime import date
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.aspiration import StudentAspiration
from app.models.school_class import SchoolClass
from app.models.student import Gender, Student, StudentStatus
from app.models.teacher import Teacher, TeacherRole
from app.models.transaction import Transaction, TransactionType
from app.services import school_class as school_class_service
from app.services import student as student_service


@pytest.fixture
async def teacher(db: AsyncSession) -> Teacher:
    """Create a homeroom teacher."""
    teacher = Teacher(name="Budi", email="budi@example.com", role=TeacherRole.HOMEROOM_TEACHER)
    db.add(teacher)
    await db.commit()
    await db.refresh(teacher)
    return teacher


@pytest.fixture
async def school_class(db: AsyncSession, teacher: Teacher) -> SchoolClass:
    """Create a test school class."""
    school_class = SchoolClass(name="7A", homeroom_teacher_id=teacher.id)
    db.add(school_class)
    await db.commit()
    await db.refresh(school_class)
    return school_class


@pytest.fixture
async def student(db: AsyncSession, school_class: SchoolClass) -> Student:
    """Create a test student."""
    student = Student(
        name="Siti Aminah",
        gender=Gender.FEMALE,
        nisn="0012345678",
        nis="1001",
        class_id=school_class.id,
    )
    db.add(student)
    await db.commit()
    await db.refresh(student)
    return student


def student_payload(class_id: int, **overrides) -> dict:
    payload = {
        "name": "Andi Wijaya",
        "gender": "male",
        "nisn": "0098765432",
        "nis": "2001",
        "class_id": class_id,
    }
    payload.update(overrides)
    return payload


class TestCreateStudent:
    """Tests for creating students."""

    async def test_create_student(self, client: AsyncClient, school_class: SchoolClass):
        """Test creating a student with bank details."""
        response = await client.post(
            "/api/v1/students",
            json=student_payload(
                school_class.id,
                phone="0812-000-111",
                email="andi@example.com",
                bank_name="Bank Sekolah",
                account_number="123-456",
            ),
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Andi Wijaya"
        assert data["gender"] == "male"
        assert data["class_id"] == school_class.id
        assert data["bank_name"] == "Bank Sekolah"
        assert data["account_number"] == "123-456"
        assert data["status"] == "active"

    async def test_create_student_unknown_class(self, client: AsyncClient, setup_database: None):
        response = await client.post("/api/v1/students", json=student_payload(999))

        assert response.status_code == 404
        assert response.json()["detail"] == "Class with id 999 not found"

    async def test_create_student_duplicate_nisn(
        self, client: AsyncClient, student: Student, school_class: SchoolClass
    ):
        """Test that NISN is unique."""
        response = await client.post(
            "/api/v1/students",
            json=student_payload(school_class.id, nisn="0012345678"),
        )

        assert response.status_code == 409

    async def test_create_student_duplicate_nis(
        self, client: AsyncClient, student: Student, school_class: SchoolClass
    ):
        response = await client.post(
            "/api/v1/students",
            json=student_payload(school_class.id, nis="1001"),
        )

        assert response.status_code == 409

    async def test_create_student_invalid_gender(
        self, client: AsyncClient, school_class: SchoolClass
    ):
        response = await client.post(
            "/api/v1/students",
            json=student_payload(school_class.id, gender="unknown"),
        )

        assert response.status_code == 422


class TestClassDeletedDuringWrite:
    """Tests for student writes whose class is deleted after the check."""

    async def test_create_returns_conflict(
        self, client: AsyncClient, db: AsyncSession, school_class: SchoolClass, monkeypatch, delete_after_check
    ):
        """Test that a missing class is not reported as a duplicate NISN."""
        monkeypatch.setattr(
            student_service,
            "require_school_class",
            delete_after_check(school_class_service.require_school_class, SchoolClass),
        )

        response = await client.post("/api/v1/students", json=student_payload(school_class.id))

        assert response.status_code == 409
        detail = response.json()["detail"]
        assert "class no longer exists" in detail
        assert not detail.startswith("A student with this NISN")
        result = await db.execute(select(Student))
        assert result.scalars().all() == []


class TestListStudents:
    """Tests for listing students."""

    async def test_list_students(self, client: AsyncClient, student: Student):
        response = await client.get("/api/v1/students")

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [student.id]

    async def test_get_student(self, client: AsyncClient, student: Student):
        response = await client.get(f"/api/v1/students/{student.id}")

        assert response.status_code == 200
        assert response.json()["nisn"] == "0012345678"

    async def test_get_student_not_found(self, client: AsyncClient, setup_database: None):
        response = await client.get("/api/v1/students/999")

        assert response.status_code == 404

    async def test_list_by_class(
        self, client: AsyncClient, db: AsyncSession, student: Student, school_class: SchoolClass
    ):
        other_class = SchoolClass(name="7B")
        db.add(other_class)
        await db.flush()
        db.add(Student(name="Other", gender=Gender.MALE, nisn="0055", nis="55", class_id=other_class.id))
        await db.commit()

        response = await client.get(f"/api/v1/students/by-class/{school_class.id}")

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [student.id]

    async def test_list_by_unknown_class(self, client: AsyncClient, setup_database: None):
        response = await client.get("/api/v1/students/by-class/999")

        assert response.status_code == 404

    async def test_list_by_teacher(self, client: AsyncClient, student: Student, teacher: Teacher):
        response = await client.get(f"/api/v1/students/by-teacher/{teacher.id}")

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == [student.id]

    async def test_list_by_teacher_without_classes(self, db: AsyncSession, student: Student):
        teacher = Teacher(name="Dewi", email="dewi@example.com", role=TeacherRole.OTHER)
        db.add(teacher)
        await db.commit()

        assert await student_service.get_students_by_teacher(db, teacher.id) == []

    async def test_list_by_unknown_teacher(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await student_service.get_students_by_teacher(db, 999)


class TestUpdateStudent:
    """Tests for updating students."""

    async def test_update_status(self, client: AsyncClient, student: Student):
        response = await client.patch(
            f"/api/v1/students/{student.id}",
            json={"status": "graduated"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "graduated"
        assert data["name"] == "Siti Aminah"

    async def test_move_to_other_class(
        self, client: AsyncClient, db: AsyncSession, student: Student
    ):
        other_class = SchoolClass(name="8A")
        db.add(other_class)
        await db.commit()

        response = await client.patch(
            f"/api/v1/students/{student.id}",
            json={"class_id": other_class.id},
        )

        assert response.status_code == 200
        assert response.json()["class_id"] == other_class.id

    async def test_move_to_unknown_class(self, client: AsyncClient, student: Student):
        response = await client.patch(f"/api/v1/students/{student.id}", json={"class_id": 999})

        assert response.status_code == 404

    async def test_update_to_taken_nis(
        self, client: AsyncClient, db: AsyncSession, student: Student, school_class: SchoolClass
    ):
        db.add(Student(name="Other", gender=Gender.MALE, nisn="0055", nis="55", class_id=school_class.id))
        await db.commit()

        response = await client.patch(f"/api/v1/students/{student.id}", json={"nis": "55"})

        assert response.status_code == 409

    async def test_update_rejects_null_class(self, client: AsyncClient, student: Student):
        response = await client.patch(f"/api/v1/students/{student.id}", json={"class_id": None})

        assert response.status_code == 422

    async def test_update_clears_bank_details(
        self, client: AsyncClient, db: AsyncSession, student: Student
    ):
        student.bank_name = "Bank Sekolah"
        await db.commit()

        response = await client.patch(f"/api/v1/students/{student.id}", json={"bank_name": None})

        assert response.status_code == 200
        assert response.json()["bank_name"] is None

    async def test_update_not_found(self, client: AsyncClient, setup_database: None):
        response = await client.patch("/api/v1/students/999", json={"name": "Nobody"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Student with id 999 not found"


class TestDeleteStudent:
    """Tests for deleting students."""

    async def test_delete_student(self, client: AsyncClient, db: AsyncSession, student: Student):
        student_id = student.id

        response = await client.delete(f"/api/v1/students/{student_id}")

        assert response.status_code == 204
        result = await db.execute(select(Student).where(Student.id == student_id))
        assert result.scalar_one_or_none() is None

    async def test_delete_student_with_transactions(
        self, client: AsyncClient, db: AsyncSession, student: Student
    ):
        """Test that the savings history blocks deletion."""
        student_id = student.id
        db.add(Transaction(
            student_id=student_id,
            date=date(2024, 1, 1),
            type=TransactionType.DEPOSIT,
            amount=Decimal("10.00"),
        ))
        await db.commit()

        response = await client.delete(f"/api/v1/students/{student_id}")

        assert response.status_code == 409
        result = await db.execute(select(Student.status).where(Student.id == student_id))
        assert result.scalar_one() == StudentStatus.ACTIVE

    async def test_delete_student_with_aspirations(
        self, client: AsyncClient, db: AsyncSession, student: Student
    ):
        student_id = student.id
        db.add(StudentAspiration(
            student_id=student_id,
            description="New bicycle",
            target_amount=Decimal("1500000.00"),
        ))
        await db.commit()

        response = await client.delete(f"/api/v1/students/{student_id}")

        assert response.status_code == 409

    async def test_delete_student_not_found(self, client: AsyncClient, setup_database: None):
        response = await client.delete("/api/v1/students/999")

        assert response.status_code == 404
