"""Built-in static dashboard content."""

from macha.content.models import AIAnalysis, MetricDefinition, SourceShare, StaticContent

AI_ANALYSIS = AIAnalysis(
    summary=(
        "이번 캠페인은 전월 대비 ROAS가 23% 상승하며 우수한 성과를 기록하고 있습니다. "
        "특히 인플루언서 협업 콘텐츠의 전환율이 기대 이상입니다."
    ),
    insights=[
        "주말(토-일) 광고 효율이 평일 대비 35% 높게 나타났습니다. 주말 예산 증액을 권장합니다.",
        "뷰티 카테고리 크리에이터의 전환율이 패션 카테고리 대비 1.8배 높습니다.",
        "릴스/숏폼 콘텐츠가 일반 피드 대비 2.3배 높은 참여율을 보입니다.",
        "25-34세 여성 타겟층에서 가장 높은 구매 전환이 발생했습니다.",
    ],
    recommendation=(
        "다음 주에는 주말 예산을 20% 증액하고, 뷰티 카테고리 크리에이터 중심으로 숏폼 콘텐츠를 "
        "확대하는 것을 권장합니다. 또한 25-34세 여성 타겟 세그먼트의 리타겟팅 캠페인 추가를 검토해 주세요."
    ),
    generated_at="2024-12-14T09:30:00Z",
)

METRIC_DEFINITIONS = {
    "roas": MetricDefinition(
        title="ROAS (Return on Ad Spend)",
        description="광고비 대비 수익률입니다. 4.2x는 1원 투자 시 4.2원의 매출을 의미합니다.",
    ),
    "spend": MetricDefinition(
        title="Ad Spend (광고 지출)",
        description="해당 기간 동안 집행된 총 광고비입니다.",
    ),
    "reach": MetricDefinition(
        title="Reach (도달)",
        description="광고 또는 콘텐츠에 노출된 고유 사용자 수입니다.",
    ),
    "impressions": MetricDefinition(
        title="Impressions (노출)",
        description="광고 또는 콘텐츠가 화면에 표시된 총 횟수입니다. 한 사용자가 여러 번 볼 수 있습니다.",
    ),
    "engagementRate": MetricDefinition(
        title="Engagement Rate (참여율)",
        description="팔로워 대비 좋아요, 댓글, 공유 등 상호작용 비율입니다. 인플루언서의 실질적 영향력을 측정합니다.",
    ),
    "totalLikes": MetricDefinition(
        title="Total Likes (총 좋아요)",
        description="캠페인 기간 동안 발생한 모든 좋아요 수입니다.",
    ),
    "videoViews": MetricDefinition(
        title="Video Views (비디오 재생 수)",
        description="영상 콘텐츠가 재생된 총 횟수입니다. 3초 이상 시청 시 카운트됩니다.",
    ),
    "totalShares": MetricDefinition(
        title="Total Shares (총 공유 수)",
        description="DM이나 스토리로 콘텐츠가 공유된 횟수입니다. 바이럴 효과의 지표입니다.",
    ),
    "totalComments": MetricDefinition(
        title="Total Comments (총 댓글 수)",
        description="게시물에 달린 댓글 수입니다. 참여도와 관심도를 나타냅니다.",
    ),
    "reachSource": MetricDefinition(
        title="Reach Source (도달 출처)",
        description="도달이 발생한 출처 비율입니다. 광고와 유기적 도달의 비율을 확인할 수 있습니다.",
    ),
    "engagementSource": MetricDefinition(
        title="Engagement Source (참여 출처)",
        description="참여가 발생한 출처 비율입니다. 광고와 유기적 참여의 비율을 확인할 수 있습니다.",
    ),
}

REACH_SOURCE = [
    SourceShare(name="광고 도달", value=69, color="#f59e0b"),
    SourceShare(name="유기적 도달", value=31, color="#6366f1"),
]

ENGAGEMENT_SOURCE = [
    SourceShare(name="유기적 참여", value=58, color="#ec4899"),
    SourceShare(name="광고 참여", value=42, color="#8b5cf6"),
]

DEFAULT_CONTENT = StaticContent(
    ai_analysis=AI_ANALYSIS,
    metric_definitions=METRIC_DEFINITIONS,
    reach_source=REACH_SOURCE,
    engagement_source=ENGAGEMENT_SOURCE,
)
