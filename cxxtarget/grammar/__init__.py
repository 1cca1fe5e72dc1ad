"""백엔드가 소비하는 문법 모델과 리터럴 언이스케이프."""
