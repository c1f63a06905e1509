"""Check a MiniJava program in a few lines, no config needed."""

from minijava import check

result = check("class A { public static void main(String[] a) { System.out.println(1+2*3); } }")
print("No error!" if result.ok else "\n".join(result.messages()))
