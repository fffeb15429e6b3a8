"""The fixed post served by the static repo."""

from datetime import datetime, timezone
from typing import Optional

from app.schemas.post import (
    CodeBlock,
    CodeContent,
    FoldContent,
    MarkdownContent,
    Post,
    TagType,
    TipContent,
    TipLevel,
)

SAMPLE_POST_ID = "mock-id-2"
SAMPLE_CREATED_AT = datetime(2023, 1, 1, tzinfo=timezone.utc)

HOOKS_GUIDE = """
# React Hooks 全面指南

## 什么是React Hooks？
React Hooks是React 16.8引入的新特性，它允许你在函数组件中使用state和其他React特性。

## 基础Hooks

### useState
```jsx
function Counter() {
  const [count, setCount] = useState(0);

  return (
    <div>
      <p>You clicked {count} times</p>
      <button onClick={() => setCount(count + 1)}>
        Click me
      </button>
    </div>
  );
}
```
### useEffect
```jsx
function Example() {
  const [data, setData] = useState(null);

  useEffect(() => {
    fetch('/api/data')
      .then(res => res.json())
      .then(data => setData(data));
  }, []); // 空数组表示只在组件挂载时执行

  return <div>{data ? data.message : 'Loading...'}</div>;
}
```
## 高级用法

### 自定义Hook
```javascript
function useWindowSize() {
  const [size, setSize] = useState({
    width: window.innerWidth,
    height: window.innerHeight
  });

  useEffect(() => {
    const handleResize = () => setSize({
      width: window.innerWidth,
      height: window.innerHeight
    });

    window.addEventListener('resize', handleResize);
    return () => window.removeEventListener('resize', handleResize);
  }, []);

  return size;
}
```

## 性能优化

### useMemo
```jsx
function ExpensiveComponent({ a, b }) {
  const result = useMemo(() => {
    // 复杂计算
    return a * b;
  }, [a, b]);

  return <div>{result}</div>;
}
```

### useCallback
```jsx
function ParentComponent() {
  const [count, setCount] = useState(0);

  const increment = useCallback(() => {
    setCount(c => c + 1);
  }, []);

  return <ChildComponent onClick={increment} />;
}
```
"""

HOOKS_RULES_TIP = "使用Hooks时，请确保遵守Hooks的规则，特别是在条件语句和循环中。"


def build_sample_post(now: Optional[datetime] = None) -> Post:
    """Build a fresh copy of the sample post; ``updatedAt`` defaults to now (UTC)."""
    return Post(
        id=SAMPLE_POST_ID,
        title="深入理解React Hooks：从基础到高级用法",
        username="react-expert",
        userLink="/user/react-expert",
        contents=[
            MarkdownContent(content=HOOKS_GUIDE),
            TipContent(level=TipLevel.TIP, content=HOOKS_RULES_TIP),
            TipContent(level=TipLevel.WARNING, content=HOOKS_RULES_TIP),
            CodeContent(
                metadata=[
                    CodeBlock(
                        language="javascript",
                        code="const [state, setState] = useState(initialState);",
                    ),
                    CodeBlock(
                        language="typescript",
                        code="const [state, setState] = useState<Type>(initialState);",
                    ),
                ]
            ),
            FoldContent(title="测试标题", content="测试文本"),
        ],
        createdAt=SAMPLE_CREATED_AT,
        updatedAt=now or datetime.now(timezone.utc),
        tags={TagType.TECH},
    )
