"""
Service for common metrics and calculations.
"""
from typing import Dict, List, Any

from episode_data.schemas import GeneratedScript

from ..common.config import AgentConfig


class MetricsService:
    """Handles common metrics calculations"""

    @staticmethod
    def calculate_read_time(word_count: int, words_per_minute: int = AgentConfig.WORDS_PER_MINUTE) -> float:
        """Calculate estimated read time in minutes"""
        return word_count / words_per_minute

    @staticmethod
    def calculate_completion_percentage(completed: int, total: int) -> float:
        """Calculate completion percentage"""
        if total == 0:
            return 0.0
        return (completed / total) * 100

    @staticmethod
    def section_report(script: GeneratedScript) -> List[Dict[str, Any]]:
        """Compare parsed sections against the template targets"""
        template = AgentConfig.get_template(script.episode_type)
        found = {section.name: section.word_count for section in script.sections}

        report = []
        for section in template["sections"]:
            words = found.get(section["name"])
            report.append({
                "name": section["name"],
                "target": section["target"],
                "word_count": words or 0,
                "present": words is not None,
                "percent_of_target": round(
                    MetricsService.calculate_completion_percentage(words or 0, section["target"]), 1
                )
            })
        return report

    @staticmethod
    def script_metrics(script: GeneratedScript) -> Dict[str, Any]:
        template = AgentConfig.get_template(script.episode_type)
        return {
            "total_words": script.total_words,
            "target_words": template["target_words"],
            "section_count": len(script.sections),
            "estimated_read_time_min": round(MetricsService.calculate_read_time(script.total_words), 1),
            "degraded": script.degraded
        }
