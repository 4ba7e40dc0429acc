"""First-run demo dataset.

Only used when a collection has never been written; an existing (even
empty) collection is never re-seeded.
"""
from __future__ import annotations

from typing import Any, Dict, List

from ..core.enums import PayrollStatus, Role


def seed_accounts() -> List[Dict[str, Any]]:
    return [
        {
            "id": "1",
            "employeeId": "EMP001",
            "email": "admin@dayflow.com",
            "password": "admin123",
            "firstName": "Priya",
            "lastName": "Sharma",
            "role": Role.ADMIN.value,
            "department": "Human Resources",
            "position": "HR Manager",
            "phone": "+91 98765 43210",
            "address": "123, MG Road, Bangalore, Karnataka - 560001",
            "joinDate": "2022-01-15",
            "profilePicture": None,
            "isVerified": True,
        },
        {
            "id": "2",
            "employeeId": "EMP002",
            "email": "rahul@dayflow.com",
            "password": "employee123",
            "firstName": "Rahul",
            "lastName": "Kumar",
            "role": Role.EMPLOYEE.value,
            "department": "Engineering",
            "position": "Software Developer",
            "phone": "+91 98765 43211",
            "address": "456, Koramangala, Bangalore, Karnataka - 560095",
            "joinDate": "2023-03-20",
            "profilePicture": None,
            "isVerified": True,
        },
        {
            "id": "3",
            "employeeId": "EMP003",
            "email": "ananya@dayflow.com",
            "password": "employee123",
            "firstName": "Ananya",
            "lastName": "Patel",
            "role": Role.EMPLOYEE.value,
            "department": "Marketing",
            "position": "Marketing Specialist",
            "phone": "+91 98765 43212",
            "address": "789, HSR Layout, Bangalore, Karnataka - 560102",
            "joinDate": "2023-06-10",
            "profilePicture": None,
            "isVerified": True,
        },
    ]


_PAYROLL_ROWS = [
    # id, employee id, name, department, position, base, allowances, deductions, status
    ("1", "EMP002", "Rahul Kumar", "Engineering", "Software Developer", 85000, 15000, 12000, PayrollStatus.PROCESSED),
    ("2", "EMP003", "Ananya Patel", "Marketing", "Marketing Specialist", 75000, 12000, 10000, PayrollStatus.PAID),
    ("3", "EMP004", "Vikram Singh", "Sales", "Sales Representative", 60000, 10000, 8000, PayrollStatus.PENDING),
    ("4", "EMP005", "Sneha Reddy", "Engineering", "Senior Developer", 120000, 20000, 15000, PayrollStatus.PAID),
    ("5", "EMP006", "Arjun Mehta", "HR", "HR Manager", 95000, 15000, 12000, PayrollStatus.PROCESSED),
    ("6", "EMP007", "Kavya Nair", "Marketing", "Marketing Manager", 100000, 18000, 13000, PayrollStatus.PAID),
]


def seed_payroll() -> List[Dict[str, Any]]:
    return [
        {
            "id": rid,
            "employeeId": emp,
            "employeeName": name,
            "department": dept,
            "position": position,
            "month": "2024-01",
            "baseSalary": base,
            "allowances": allowances,
            "deductions": deductions,
            "netSalary": base + allowances - deductions,
            "status": status.value,
        }
        for rid, emp, name, dept, position, base, allowances, deductions, status in _PAYROLL_ROWS
    ]
