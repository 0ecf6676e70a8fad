from datetime import datetime, timedelta, timezone
from app.db import SessionLocal
from app.repositories.achievement_repo import AchievementRepository
from app.repositories.exercise_repo import ExerciseRepository
from app.repositories.log_repo import LogRepository
from app.repositories.user_repo import UserRepository
from app.schemas.enums import AchievementType, RecordKind
from app.schemas.exercise import ExerciseCreate
from app.schemas.exercise_log import LogCreate
from app.security import hash_password
import uuid, pytest

def new_user(repo):
    return repo.create(email=f"{uuid.uuid4().hex[:8]}@ex.com", name="Repo",
                       password_hash=hash_password("StrongPassw0rd!"))

def test_user_repo_create_and_get():
    db = SessionLocal()
    repo = UserRepository(db)
    u = new_user(repo)
    assert u.id and u.role.value == "client"
    assert repo.get(u.id).email == u.email
    assert repo.get_by_email(u.email.upper()).id == u.id
    assert repo.lock(u.id).id == u.id
    db.close()

def test_user_repo_unique_email_violation():
    db = SessionLocal()
    repo = UserRepository(db)
    email = f"{uuid.uuid4().hex[:8]}@ex.com"
    repo.create(email=email, name="A", password_hash="")
    with pytest.raises(ValueError, match="email_already_exists"):
        repo.create(email=email, name="B", password_hash="")
    db.close()

def test_exercise_repo_unique_name():
    db = SessionLocal()
    repo = ExerciseRepository(db)
    name = f"Row {uuid.uuid4().hex[:6]}"
    repo.create(ExerciseCreate(name=name, movement_pattern="pull", is_compound=True))
    assert repo.get_by_name(name.lower()).name == name
    with pytest.raises(ValueError, match="exercise_name_taken"):
        repo.create(ExerciseCreate(name=name))
    db.close()

def test_log_repo_history_is_newest_first():
    db = SessionLocal()
    user = new_user(UserRepository(db))
    exercise = ExerciseRepository(db).create(ExerciseCreate(name=f"Squat {uuid.uuid4().hex[:6]}"))
    logs = LogRepository(db)
    base = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc)
    for days, weight in ((0, 80), (2, 85), (1, 82.5)):
        logs.create(user.id, LogCreate(exercise_id=exercise.id, sets_completed=3, reps_completed="5",
                                       weight_kg=weight), completed_at=base + timedelta(days=days))
    db.commit()

    history = logs.history(user.id, exercise.id)
    assert [e.weight_kg for e in history] == [85, 82.5, 80]
    assert [e.weight_kg for e in logs.history(user.id, exercise.id, limit=2)] == [85, 82.5]
    assert logs.count_for_user(user.id) == 3
    assert len(logs.workout_times(user.id)) == 3
    page = logs.list_for_user(user.id, limit=1)
    assert page.total == 3 and len(page.items) == 1
    db.close()

def test_flag_record_keeps_first_kind():
    db = SessionLocal()
    user = new_user(UserRepository(db))
    exercise = ExerciseRepository(db).create(ExerciseCreate(name=f"Press {uuid.uuid4().hex[:6]}"))
    logs = LogRepository(db)
    entry = logs.create(user.id, LogCreate(exercise_id=exercise.id, sets_completed=3, reps_completed="5",
                                           weight_kg=40), completed_at=datetime.now(timezone.utc))
    logs.flag_record(entry, RecordKind.weight)
    logs.flag_record(entry, RecordKind.volume)
    db.commit()
    assert entry.is_pr and entry.pr_type == RecordKind.weight
    db.close()

def test_achievement_repo_award_lookup():
    db = SessionLocal()
    user = new_user(UserRepository(db))
    awards = AchievementRepository(db)
    assert not awards.has_award(user.id, AchievementType.streak, 7)
    a = awards.create(user.id, achievement_type=AchievementType.streak, title="7-Day Streak!",
                      description="...", metric_value=7)
    db.commit()
    assert awards.has_award(user.id, AchievementType.streak, 7)
    assert not awards.has_award(user.id, AchievementType.milestone, 7)
    assert [x.id for x in awards.list_for_user(user.id, uncelebrated=True)] == [a.id]
    awards.mark_celebrated(a.id)
    assert awards.list_for_user(user.id, uncelebrated=True) == []
    assert awards.mark_celebrated(999999) is None
    db.close()
