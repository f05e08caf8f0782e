"""Default exercise library."""

from __future__ import annotations

from workout_engine.models.enums import (
    Difficulty,
    Equipment,
    ExerciseCategory,
    ModificationType,
    MuscleGroup,
)
from workout_engine.models.exercise import Exercise, ExerciseModification

DEFAULT_EXERCISES: tuple[Exercise, ...] = (
    Exercise(
        id="running",
        name="Running",
        description="Outdoor or treadmill running for cardiovascular fitness",
        category=ExerciseCategory.CARDIO,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.BEGINNER,
        duration_min=30,
        calories_per_minute=10.0,
        instructions=(
            "Start with a 5-minute warm-up walk",
            "Gradually increase pace to comfortable running speed",
            "Maintain steady breathing throughout",
            "Cool down with 5-minute walk",
        ),
        muscle_groups=(MuscleGroup.FULL_BODY,),
        modifications=(
            ExerciseModification(ModificationType.EASIER, "Walk-run intervals for beginners"),
            ExerciseModification(ModificationType.HARDER, "Add hill intervals or increase pace"),
        ),
    ),
    Exercise(
        id="hiit-bodyweight",
        name="HIIT Bodyweight",
        description="High-intensity interval training using bodyweight exercises",
        category=ExerciseCategory.HIIT,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.INTERMEDIATE,
        duration_min=25,
        calories_per_minute=12.0,
        instructions=(
            "Perform each exercise for 45 seconds",
            "Rest for 15 seconds between exercises",
            "Complete 4 rounds total",
            "Exercises: Burpees, Mountain Climbers, Jump Squats, Push-ups",
        ),
        muscle_groups=(MuscleGroup.FULL_BODY,),
        modifications=(
            ExerciseModification(
                ModificationType.EASIER,
                "Reduce work time to 30 seconds, increase rest to 30 seconds",
            ),
            ExerciseModification(
                ModificationType.HARDER, "Add weights or increase work time to 60 seconds"
            ),
        ),
    ),
    Exercise(
        id="cycling",
        name="Cycling",
        description="Indoor or outdoor cycling workout",
        category=ExerciseCategory.CARDIO,
        equipment=(Equipment.STATIONARY_BIKE,),
        difficulty=Difficulty.BEGINNER,
        duration_min=40,
        calories_per_minute=8.0,
        instructions=(
            "Start with 5-minute easy pace warm-up",
            "Alternate between moderate and high intensity",
            "Maintain proper posture throughout",
            "Cool down with easy pace for 5 minutes",
        ),
        muscle_groups=(MuscleGroup.QUADRICEPS, MuscleGroup.HAMSTRINGS, MuscleGroup.CALVES),
        modifications=(
            ExerciseModification(ModificationType.EASIER, "Maintain steady moderate pace throughout"),
            ExerciseModification(ModificationType.HARDER, "Add sprint intervals every 5 minutes"),
        ),
    ),
    Exercise(
        id="strength-dumbbells",
        name="Dumbbell Strength",
        description="Full-body strength training with dumbbells",
        category=ExerciseCategory.STRENGTH,
        equipment=(Equipment.DUMBBELLS,),
        difficulty=Difficulty.INTERMEDIATE,
        duration_min=35,
        calories_per_minute=6.0,
        instructions=(
            "Perform 3 sets of 8-12 reps for each exercise",
            "Rest 60-90 seconds between sets",
            "Focus on proper form over heavy weight",
            "Include: Squats, Chest Press, Rows, Shoulder Press",
        ),
        muscle_groups=(MuscleGroup.FULL_BODY,),
        modifications=(
            ExerciseModification(ModificationType.EASIER, "Use lighter weights, reduce to 2 sets"),
            ExerciseModification(ModificationType.HARDER, "Increase weight, add drop sets"),
        ),
        sets=3,
        reps=12,
        rest_seconds=75,
    ),
    Exercise(
        id="yoga-flow",
        name="Yoga Flow",
        description="Dynamic yoga sequence for flexibility and strength",
        category=ExerciseCategory.YOGA,
        equipment=(Equipment.YOGA_MAT,),
        difficulty=Difficulty.BEGINNER,
        duration_min=30,
        calories_per_minute=3.0,
        instructions=(
            "Begin in mountain pose with deep breathing",
            "Flow through sun salutations",
            "Hold warrior poses for 30 seconds each",
            "End with relaxation pose",
        ),
        muscle_groups=(MuscleGroup.FULL_BODY,),
        modifications=(
            ExerciseModification(ModificationType.EASIER, "Use blocks and straps for support"),
            ExerciseModification(
                ModificationType.INJURY_ADAPTATION,
                "Seated variations for knee injuries",
                target_condition="knee injury",
            ),
        ),
    ),
    Exercise(
        id="push-ups",
        name="Push-ups",
        description="Classic upper body strength exercise",
        category=ExerciseCategory.STRENGTH,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.BEGINNER,
        duration_min=10,
        calories_per_minute=8.0,
        instructions=(
            "Start in plank position with hands shoulder-width apart",
            "Lower body until chest nearly touches ground",
            "Push back up to starting position",
            "Keep core engaged throughout",
        ),
        muscle_groups=(
            MuscleGroup.CHEST,
            MuscleGroup.SHOULDERS,
            MuscleGroup.TRICEPS,
            MuscleGroup.CORE,
        ),
        modifications=(
            ExerciseModification(ModificationType.EASIER, "Knee push-ups or wall push-ups"),
            ExerciseModification(ModificationType.HARDER, "Diamond push-ups or weighted push-ups"),
        ),
        sets=3,
        reps=15,
        rest_seconds=60,
    ),
    Exercise(
        id="brisk-walk",
        name="Brisk Walk",
        description="Low-impact walking at a pace that raises the heart rate",
        category=ExerciseCategory.CARDIO,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.BEGINNER,
        duration_min=20,
        calories_per_minute=5.0,
        instructions=(
            "Walk at a pace where talking is possible but singing is not",
            "Swing arms naturally and keep posture tall",
            "Finish with 2 minutes of easy walking",
        ),
        muscle_groups=(MuscleGroup.QUADRICEPS, MuscleGroup.CALVES, MuscleGroup.GLUTES),
        modifications=(
            ExerciseModification(ModificationType.HARDER, "Add inclines or short jogging bursts"),
        ),
    ),
    Exercise(
        id="tabata-express",
        name="Tabata Express",
        description="Short Tabata-style bodyweight intervals",
        category=ExerciseCategory.HIIT,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.INTERMEDIATE,
        duration_min=15,
        calories_per_minute=13.0,
        instructions=(
            "20 seconds of maximal effort, 10 seconds rest",
            "8 rounds per block, 3 blocks total",
            "Alternate squat jumps, high knees and burpees",
        ),
        muscle_groups=(MuscleGroup.FULL_BODY,),
        modifications=(
            ExerciseModification(ModificationType.EASIER, "Replace jumps with step-outs"),
        ),
    ),
    Exercise(
        id="full-body-stretch",
        name="Full Body Stretch",
        description="Static and dynamic stretching routine for mobility",
        category=ExerciseCategory.FLEXIBILITY,
        equipment=(Equipment.NONE,),
        difficulty=Difficulty.BEGINNER,
        duration_min=15,
        calories_per_minute=2.5,
        instructions=(
            "Hold each stretch for 30 seconds",
            "Move from neck and shoulders down to calves",
            "Breathe slowly and never bounce",
        ),
        muscle_groups=(MuscleGroup.FULL_BODY,),
        modifications=(
            ExerciseModification(
                ModificationType.INJURY_ADAPTATION,
                "Skip loaded back bends and use supported forward folds",
                target_condition="back injury",
            ),
        ),
    ),
    Exercise(
        id="kettlebell-complex",
        name="Kettlebell Complex",
        description="Swings, cleans and presses chained without rest",
        category=ExerciseCategory.STRENGTH,
        equipment=(Equipment.KETTLEBELL,),
        difficulty=Difficulty.ADVANCED,
        duration_min=30,
        calories_per_minute=11.0,
        instructions=(
            "Perform 5 swings, 5 cleans, 5 presses per side",
            "Rest 90 seconds between complexes",
            "Complete 6 complexes",
        ),
        muscle_groups=(
            MuscleGroup.GLUTES,
            MuscleGroup.HAMSTRINGS,
            MuscleGroup.SHOULDERS,
            MuscleGroup.CORE,
        ),
        modifications=(
            ExerciseModification(ModificationType.EASIER, "Swings only with a lighter bell"),
        ),
        sets=6,
        reps=5,
        rest_seconds=90,
    ),
)
