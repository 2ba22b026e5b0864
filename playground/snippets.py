DEFAULT_CODE = """#include <iostream>
using namespace std;

int main() {
    cout << "Hello, World!" << endl;

    // Try editing this code!
    int a = 5, b = 10;
    cout << "Sum of " << a << " and " << b << " is: " << a + b << endl;

    return 0;
}"""

# Shown in the "Examples" menu, in this order
EXAMPLE_SNIPPETS = [
    {
        'name': 'Hello World',
        'code': """#include <iostream>
using namespace std;

int main() {
    cout << "Hello, World!" << endl;
    return 0;
}""",
    },
    {
        'name': 'Fibonacci',
        'code': """#include <iostream>
using namespace std;

int fibonacci(int n) {
    if (n <= 1) return n;
    return fibonacci(n - 1) + fibonacci(n - 2);
}

int main() {
    cout << "Fibonacci Sequence:" << endl;
    for (int i = 0; i < 15; i++) {
        cout << fibonacci(i) << " ";
    }
    cout << endl;
    return 0;
}""",
    },
    {
        'name': 'Prime Numbers',
        'code': """#include <iostream>
using namespace std;

bool isPrime(int n) {
    if (n <= 1) return false;
    for (int i = 2; i * i <= n; i++) {
        if (n % i == 0) return false;
    }
    return true;
}

int main() {
    cout << "Prime numbers from 1 to 50:" << endl;
    for (int i = 1; i <= 50; i++) {
        if (isPrime(i)) {
            cout << i << " ";
        }
    }
    cout << endl;
    return 0;
}""",
    },
    {
        'name': 'Sorting Array',
        'code': """#include <iostream>
#include <algorithm>
using namespace std;

int main() {
    int arr[] = {64, 34, 25, 12, 22, 11, 90};
    int n = sizeof(arr) / sizeof(arr[0]);

    cout << "Original array: ";
    for (int i = 0; i < n; i++) cout << arr[i] << " ";
    cout << endl;

    sort(arr, arr + n);

    cout << "Sorted array: ";
    for (int i = 0; i < n; i++) cout << arr[i] << " ";
    cout << endl;

    return 0;
}""",
    },
]
