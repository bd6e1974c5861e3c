class BaseAI:
    """모든 AI 클래스가 상속받을 기본 클래스입니다."""
    def get_move(self, board):
        """
        주어진 보드를 기반으로 다음 움직임을 결정합니다. 보드는 수정하지 않습니다.

        Args:
            board (np.ndarray): 현재 보드.

        Returns:
            Direction | None: 추천 방향. 움직일 수 있는 방향이 없으면 None.
            dict: 방향별 분석 데이터.
        """
        raise NotImplementedError("이 메소드는 서브클래스에서 반드시 구현되어야 합니다.")
