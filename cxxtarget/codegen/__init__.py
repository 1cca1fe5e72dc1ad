"""C++ 백엔드 코드 생성 요소 (인코딩, 리터럴, 휴리스틱, 스코프, 네임스페이스)."""
