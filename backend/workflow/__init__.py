from workflow.lesson import LessonWorkflow, Stage

__all__ = ["LessonWorkflow", "Stage"]
