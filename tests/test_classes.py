"""Tests for school classes API."""

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.models.school_class import SchoolClass
from app.models.student import Gender, Student
from app.models.teacher import Teacher, TeacherRole
from app.schemas.school_class import SchoolClassUpdate
from app.services import school_class as school_class_service
from app.services import teacher as teacher_service


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


class TestCreateClass:
    """Tests for creating school classes."""

    async def test_create_class(self, client: AsyncClient, teacher: Teacher):
        """Test creating a class with a homeroom teacher."""
        response = await client.post(
            "/api/v1/classes",
            json={"name": "8B", "homeroom_teacher_id": teacher.id},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "8B"
        assert data["homeroom_teacher_id"] == teacher.id

    async def test_create_class_without_teacher(self, client: AsyncClient, setup_database: None):
        response = await client.post("/api/v1/classes", json={"name": "8C"})

        assert response.status_code == 201
        assert response.json()["homeroom_teacher_id"] is None

    async def test_create_class_unknown_teacher(self, client: AsyncClient, setup_database: None):
        """Test that the homeroom teacher must exist."""
        response = await client.post(
            "/api/v1/classes",
            json={"name": "8D", "homeroom_teacher_id": 999},
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Teacher with id 999 not found"

    async def test_create_class_empty_name(self, client: AsyncClient, setup_database: None):
        response = await client.post("/api/v1/classes", json={"name": ""})

        assert response.status_code == 422


class TestListClasses:
    """Tests for listing school classes."""

    async def test_list_classes(self, client: AsyncClient, school_class: SchoolClass):
        response = await client.get("/api/v1/classes")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [school_class.id]

    async def test_get_class(self, client: AsyncClient, school_class: SchoolClass):
        response = await client.get(f"/api/v1/classes/{school_class.id}")

        assert response.status_code == 200
        assert response.json()["name"] == "7A"

    async def test_get_class_not_found(self, client: AsyncClient, setup_database: None):
        response = await client.get("/api/v1/classes/999")

        assert response.status_code == 404

    async def test_list_by_teacher(
        self, client: AsyncClient, db: AsyncSession, school_class: SchoolClass, teacher: Teacher
    ):
        db.add(SchoolClass(name="9A"))
        await db.commit()

        response = await client.get(f"/api/v1/classes/by-teacher/{teacher.id}")

        assert response.status_code == 200
        assert [c["id"] for c in response.json()] == [school_class.id]

    async def test_list_by_teacher_without_classes(self, client: AsyncClient, db: AsyncSession):
        teacher = Teacher(name="Dewi", email="dewi@example.com", role=TeacherRole.OTHER)
        db.add(teacher)
        await db.commit()

        response = await client.get(f"/api/v1/classes/by-teacher/{teacher.id}")

        assert response.status_code == 200
        assert response.json() == []

    async def test_list_by_unknown_teacher(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await school_class_service.get_school_classes_by_teacher(db, 999)


class TestUpdateClass:
    """Tests for updating school classes."""

    async def test_rename_class(self, client: AsyncClient, school_class: SchoolClass, teacher: Teacher):
        response = await client.patch(f"/api/v1/classes/{school_class.id}", json={"name": "7A Plus"})

        assert response.status_code == 200
        assert response.json()["name"] == "7A Plus"
        assert response.json()["homeroom_teacher_id"] == teacher.id

    async def test_unassign_teacher(self, client: AsyncClient, school_class: SchoolClass):
        """Test that an explicit null removes the homeroom teacher."""
        response = await client.patch(
            f"/api/v1/classes/{school_class.id}",
            json={"homeroom_teacher_id": None},
        )

        assert response.status_code == 200
        assert response.json()["homeroom_teacher_id"] is None

    async def test_assign_unknown_teacher(self, client: AsyncClient, school_class: SchoolClass):
        response = await client.patch(
            f"/api/v1/classes/{school_class.id}",
            json={"homeroom_teacher_id": 999},
        )

        assert response.status_code == 404

    async def test_update_class_not_found(self, client: AsyncClient, setup_database: None):
        response = await client.patch("/api/v1/classes/999", json={"name": "X"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Class with id 999 not found"


class TestTeacherDeletedDuringWrite:
    """Tests for class writes whose homeroom teacher is deleted after the check."""

    async def test_create_returns_conflict(
        self, client: AsyncClient, db: AsyncSession, teacher: Teacher, monkeypatch, delete_after_check
    ):
        teacher_id = teacher.id
        monkeypatch.setattr(
            school_class_service,
            "require_teacher",
            delete_after_check(teacher_service.require_teacher, Teacher),
        )

        response = await client.post(
            "/api/v1/classes",
            json={"name": "8B", "homeroom_teacher_id": teacher_id},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == f"Teacher with id {teacher_id} no longer exists"
        result = await db.execute(select(SchoolClass))
        assert result.scalars().all() == []

    async def test_update_raises_conflict(
        self, db: AsyncSession, school_class: SchoolClass, teacher: Teacher, monkeypatch, delete_after_check
    ):
        """Test that reassigning to a teacher deleted meanwhile keeps the old teacher."""
        class_id = school_class.id
        original_teacher_id = teacher.id
        new_teacher = Teacher(name="Dewi", email="dewi@example.com", role=TeacherRole.HOMEROOM_TEACHER)
        db.add(new_teacher)
        await db.commit()
        new_teacher_id = new_teacher.id
        monkeypatch.setattr(
            school_class_service,
            "require_teacher",
            delete_after_check(teacher_service.require_teacher, Teacher),
        )

        with pytest.raises(ConflictError):
            await school_class_service.update_school_class(
                db, class_id, SchoolClassUpdate(homeroom_teacher_id=new_teacher_id)
            )

        result = await db.execute(
            select(SchoolClass.homeroom_teacher_id).where(SchoolClass.id == class_id)
        )
        assert result.scalar_one() == original_teacher_id


class TestDeleteClass:
    """Tests for deleting school classes."""

    async def test_delete_empty_class(
        self, client: AsyncClient, db: AsyncSession, school_class: SchoolClass
    ):
        class_id = school_class.id

        response = await client.delete(f"/api/v1/classes/{class_id}")

        assert response.status_code == 204
        result = await db.execute(select(SchoolClass).where(SchoolClass.id == class_id))
        assert result.scalar_one_or_none() is None

    async def test_delete_class_with_students(
        self, client: AsyncClient, db: AsyncSession, school_class: SchoolClass
    ):
        """Test that a class with enrolled students cannot be deleted."""
        class_id = school_class.id
        db.add(Student(name="Siti", gender=Gender.FEMALE, nisn="0011", nis="11", class_id=class_id))
        await db.commit()

        response = await client.delete(f"/api/v1/classes/{class_id}")

        assert response.status_code == 409
        result = await db.execute(select(SchoolClass.id).where(SchoolClass.id == class_id))
        assert result.scalar_one() == class_id

    async def test_delete_class_not_found(self, client: AsyncClient, setup_database: None):
        response = await client.delete("/api/v1/classes/999")

        assert response.status_code == 404
